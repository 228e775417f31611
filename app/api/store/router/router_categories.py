from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.store.schemas.schema_category import CategoryOut
from app.api.store.services.service_categories import CategoriesService
from app.database.db_connection import get_db

router = APIRouter(prefix="/categories", tags=["Store - Categories"])


@router.get("", response_model=List[CategoryOut])
def list_categories(db: Session = Depends(get_db)):
    return CategoriesService(db).list_categories()
