from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.api.store.schemas.schema_category import CategoryOut


class ProductBase(BaseModel):
    product_name: str
    price: Decimal = Field(..., ge=0, decimal_places=2)
    brand: str
    category_id: int


class ProductCreate(ProductBase):
    pass


class ProductUpdate(ProductBase):
    """Full replacement of the editable product fields."""


class ProductOut(BaseModel):
    id: int
    product_name: str
    price: Decimal
    brand: str
    category: Optional[CategoryOut] = None

    model_config = ConfigDict(from_attributes=True)
