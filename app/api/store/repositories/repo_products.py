# app/api/store/repositories/repo_products.py
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, contains_eager, joinedload

from app.api.store.models.model_category import CategoryModel
from app.api.store.models.model_product import ProductModel


class ProductRepository:
    def __init__(self, db: Session):
        self.db = db

    def search(self, q: Optional[str] = None) -> List[ProductModel]:
        """Products with their category; `q` matches product or category name, case-insensitive."""
        query = (
            self.db.query(ProductModel)
            .outerjoin(ProductModel.category)
            .options(contains_eager(ProductModel.category))
            .order_by(ProductModel.id)
        )

        # a blank term is no filter; % and _ match literally
        if q and q.strip():
            query = query.filter(
                or_(
                    ProductModel.product_name.icontains(q, autoescape=True),
                    CategoryModel.category_name.icontains(q, autoescape=True),
                )
            )

        return query.all()

    def get_by_id(self, product_id: int) -> Optional[ProductModel]:
        return (
            self.db.query(ProductModel)
            .options(joinedload(ProductModel.category))
            .filter(ProductModel.id == product_id)
            .first()
        )

    def list_by_ids(self, ids: List[int]) -> List[ProductModel]:
        if not ids:
            return []
        return (
            self.db.query(ProductModel)
            .options(joinedload(ProductModel.category))
            .filter(ProductModel.id.in_(ids))
            .all()
        )

    def create(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def update(self, product: ProductModel, data: dict) -> ProductModel:
        for key, value in data.items():
            setattr(product, key, value)
        self.db.commit()
        self.db.refresh(product)
        return product
