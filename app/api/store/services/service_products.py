# app/api/store/services/service_products.py
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.store.models.model_product import ProductModel
from app.api.store.repositories.repo_products import ProductRepository
from app.api.store.schemas.schema_product import ProductCreate, ProductOut, ProductUpdate
from app.api.store.services.service_projections import project_product
from app.utils.logger import logger


class ProductsService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = ProductRepository(db)

    def _get_or_404(self, product_id: int) -> ProductModel:
        product = self.repo.get_by_id(product_id)
        if not product:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
        return product

    def search_products(self, search: Optional[str] = None) -> List[ProductOut]:
        return [project_product(p) for p in self.repo.search(search)]

    def get_product(self, product_id: int) -> ProductOut:
        return project_product(self._get_or_404(product_id))

    def create_product(self, data: ProductCreate) -> ProductOut:
        product = ProductModel(
            product_name=data.product_name,
            price=data.price,
            brand=data.brand,
            category_id=data.category_id,
        )
        try:
            product = self.repo.create(product)
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"[Products] Create failed for category_id={data.category_id}: {e.orig}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Could not create product")

        logger.info(f"[Products] Created id={product.id} name={product.product_name}")
        return project_product(self._get_or_404(product.id))

    def update_product(self, product_id: int, data: ProductUpdate) -> None:
        product = self._get_or_404(product_id)
        try:
            self.repo.update(product, data.model_dump())
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"[Products] Update failed id={product_id}: {e.orig}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Could not update product")

        logger.info(f"[Products] Updated id={product_id}")
