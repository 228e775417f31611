from typing import List

from sqlalchemy.orm import Session

from app.api.store.repositories.repo_categories import CategoryRepository
from app.api.store.schemas.schema_category import CategoryOut
from app.api.store.services.service_projections import project_category


class CategoriesService:
    def __init__(self, db: Session):
        self.repo = CategoryRepository(db)

    def list_categories(self) -> List[CategoryOut]:
        return [project_category(c) for c in self.repo.list()]
