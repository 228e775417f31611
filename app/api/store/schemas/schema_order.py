from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.api.store.schemas.schema_product import ProductOut


class OrderProductIn(BaseModel):
    product_id: int
    quantity: int = Field(..., gt=0)


class OrderCreate(BaseModel):
    cashier_id: int
    paid_on_date: Optional[datetime] = None
    order_products: List[OrderProductIn] = []


class OrderProductOut(BaseModel):
    product: Optional[ProductOut] = None
    quantity: int

    model_config = ConfigDict(from_attributes=True)


class CashierSummaryOut(BaseModel):
    """Cashier embedded in an order view; never lists orders."""
    id: int
    first_name: str
    last_name: str
    full_name: str

    model_config = ConfigDict(from_attributes=True)


class CashierOrderOut(BaseModel):
    """Order nested under its cashier."""
    id: int
    paid_on_date: Optional[datetime] = None
    total: Decimal
    order_products: List[OrderProductOut] = []

    model_config = ConfigDict(from_attributes=True)


class OrderOut(CashierOrderOut):
    """Order as the root of the view, with its cashier."""
    cashier: Optional[CashierSummaryOut] = None
