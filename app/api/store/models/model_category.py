from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from app.database.db_connection import Base


class CategoryModel(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    category_name = Column(String(100), nullable=False)

    products = relationship("ProductModel", back_populates="category")
