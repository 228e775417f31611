from typing import List

from pydantic import BaseModel, ConfigDict

from app.api.store.schemas.schema_order import CashierOrderOut


class CashierCreate(BaseModel):
    first_name: str
    last_name: str


class CashierOut(BaseModel):
    """Cashier as the root of the view; its orders carry no cashier back-reference."""
    id: int
    first_name: str
    last_name: str
    full_name: str
    orders: List[CashierOrderOut] = []

    model_config = ConfigDict(from_attributes=True)
