from typing import List, Optional

from sqlalchemy.orm import Session

from app.api.store.models.model_category import CategoryModel


class CategoryRepository:
    def __init__(self, db: Session):
        self.db = db

    def list(self) -> List[CategoryModel]:
        return self.db.query(CategoryModel).order_by(CategoryModel.id).all()

    def get_by_id(self, category_id: int) -> Optional[CategoryModel]:
        return (
            self.db.query(CategoryModel)
            .filter(CategoryModel.id == category_id)
            .first()
        )
