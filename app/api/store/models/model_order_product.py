from sqlalchemy import Column, Integer, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from app.database.db_connection import Base


class OrderProductModel(Base):
    __tablename__ = "order_products"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_order_products_quantity_positive"),
    )

    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), primary_key=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="RESTRICT"), primary_key=True)
    quantity = Column(Integer, nullable=False, default=1)

    order = relationship("OrderModel", back_populates="order_products")
    product = relationship("ProductModel")
