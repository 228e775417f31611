# app/api/store/repositories/repo_orders.py
from datetime import date, datetime, time, timedelta
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload, selectinload

from app.api.store.models.model_order import OrderModel
from app.api.store.models.model_order_product import OrderProductModel
from app.api.store.models.model_product import ProductModel


class OrderRepository:
    def __init__(self, db: Session):
        self.db = db

    def _query_full(self):
        return (
            self.db.query(OrderModel)
            .options(
                joinedload(OrderModel.cashier),
                selectinload(OrderModel.order_products)
                .joinedload(OrderProductModel.product)
                .joinedload(ProductModel.category),
            )
        )

    def get_by_id(self, order_id: int) -> Optional[OrderModel]:
        return (
            self._query_full()
            .filter(OrderModel.id == order_id)
            .first()
        )

    def list(self, order_date: Optional[date] = None) -> List[OrderModel]:
        query = self._query_full().order_by(OrderModel.id)

        if order_date:
            # whole calendar day; orders without paid_on_date never match
            start = datetime.combine(order_date, time.min)
            query = query.filter(
                OrderModel.paid_on_date.isnot(None),
                OrderModel.paid_on_date >= start,
                OrderModel.paid_on_date < start + timedelta(days=1),
            )

        return query.all()

    def get_plain(self, order_id: int) -> Optional[OrderModel]:
        return (
            self.db.query(OrderModel)
            .filter(OrderModel.id == order_id)
            .first()
        )

    def create(self, order: OrderModel) -> OrderModel:
        self.db.add(order)
        self.db.commit()
        return order

    def delete(self, order: OrderModel) -> None:
        self.db.delete(order)
        self.db.commit()
