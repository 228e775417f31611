from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from app.database.db_connection import Base


class CashierModel(Base):
    __tablename__ = "cashiers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)

    orders = relationship("OrderModel", back_populates="cashier", order_by="OrderModel.id")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
