from sqlalchemy import Column, Integer, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from app.database.db_connection import Base


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    cashier_id = Column(Integer, ForeignKey("cashiers.id", ondelete="RESTRICT"), nullable=False, index=True)
    paid_on_date = Column(DateTime, nullable=True)

    cashier = relationship("CashierModel", back_populates="orders")
    # the total is derived from these lines on every read, never stored
    order_products = relationship(
        "OrderProductModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderProductModel.product_id",
    )
