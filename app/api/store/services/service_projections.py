"""
Order totals and response views of the store domain.

Every function here is pure: it reads the loaded entity graph and builds new
schema objects, never touching the session or mutating the entities.

The views are direction specific. An order projected under its cashier
(`CashierOrderOut`) has no cashier field, and the cashier embedded in a
root order (`CashierSummaryOut`) has no orders field, so no view can lead
back to its own root.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional

from app.api.store.models.model_cashier import CashierModel
from app.api.store.models.model_category import CategoryModel
from app.api.store.models.model_order import OrderModel
from app.api.store.models.model_order_product import OrderProductModel
from app.api.store.models.model_product import ProductModel
from app.api.store.schemas.schema_cashier import CashierOut
from app.api.store.schemas.schema_category import CategoryOut
from app.api.store.schemas.schema_order import (
    CashierOrderOut,
    CashierSummaryOut,
    OrderOut,
    OrderProductOut,
)
from app.api.store.schemas.schema_product import ProductOut

ZERO = Decimal("0.00")


def _dec(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def compute_order_total(order_products: Optional[Iterable[OrderProductModel]]) -> Decimal:
    """
    Sum of quantity * current product price over the order lines.

    A line whose product is not resolved contributes zero.
    """
    total = ZERO
    for line in order_products or ():
        product = getattr(line, "product", None)
        if product is None or product.price is None:
            continue
        total += _dec(product.price) * line.quantity
    return total


def project_category(category: Optional[CategoryModel]) -> Optional[CategoryOut]:
    if category is None:
        return None
    return CategoryOut(id=category.id, category_name=category.category_name)


def project_product(product: ProductModel) -> ProductOut:
    return ProductOut(
        id=product.id,
        product_name=product.product_name,
        price=_dec(product.price),
        brand=product.brand,
        category=project_category(product.category),
    )


def project_order_line(line: OrderProductModel) -> OrderProductOut:
    product = getattr(line, "product", None)
    return OrderProductOut(
        product=project_product(product) if product is not None else None,
        quantity=line.quantity,
    )


def project_cashier_summary(cashier: Optional[CashierModel]) -> Optional[CashierSummaryOut]:
    if cashier is None:
        return None
    return CashierSummaryOut(
        id=cashier.id,
        first_name=cashier.first_name,
        last_name=cashier.last_name,
        full_name=cashier.full_name,
    )


def project_cashier_order(order: OrderModel) -> CashierOrderOut:
    """Order seen from its cashier: no back-reference."""
    lines = order.order_products or []
    return CashierOrderOut(
        id=order.id,
        paid_on_date=order.paid_on_date,
        total=compute_order_total(lines),
        order_products=[project_order_line(line) for line in lines],
    )


def project_order(order: OrderModel) -> OrderOut:
    """Order as the root of the view, embedding its cashier."""
    lines = order.order_products or []
    return OrderOut(
        id=order.id,
        paid_on_date=order.paid_on_date,
        total=compute_order_total(lines),
        cashier=project_cashier_summary(order.cashier),
        order_products=[project_order_line(line) for line in lines],
    )


def project_cashier(cashier: CashierModel) -> CashierOut:
    return CashierOut(
        id=cashier.id,
        first_name=cashier.first_name,
        last_name=cashier.last_name,
        full_name=cashier.full_name,
        orders=[project_cashier_order(order) for order in cashier.orders or []],
    )
