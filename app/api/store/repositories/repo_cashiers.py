from typing import Optional

from sqlalchemy.orm import Session, joinedload, selectinload

from app.api.store.models.model_cashier import CashierModel
from app.api.store.models.model_order import OrderModel
from app.api.store.models.model_order_product import OrderProductModel
from app.api.store.models.model_product import ProductModel


class CashierRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, cashier_id: int) -> Optional[CashierModel]:
        return (
            self.db.query(CashierModel)
            .filter(CashierModel.id == cashier_id)
            .first()
        )

    def get_with_orders(self, cashier_id: int) -> Optional[CashierModel]:
        """Cashier -> orders -> order products -> product -> category, loaded in one go."""
        return (
            self.db.query(CashierModel)
            .options(
                selectinload(CashierModel.orders)
                .selectinload(OrderModel.order_products)
                .joinedload(OrderProductModel.product)
                .joinedload(ProductModel.category)
            )
            .filter(CashierModel.id == cashier_id)
            .first()
        )

    def create(self, cashier: CashierModel) -> CashierModel:
        self.db.add(cashier)
        self.db.commit()
        self.db.refresh(cashier)
        return cashier
