# app/api/store/services/service_orders.py
from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional, Tuple

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.store.models.model_order import OrderModel
from app.api.store.models.model_order_product import OrderProductModel
from app.api.store.models.model_product import ProductModel
from app.api.store.repositories.repo_orders import OrderRepository
from app.api.store.repositories.repo_products import ProductRepository
from app.api.store.schemas.schema_order import OrderCreate, OrderOut, OrderProductIn
from app.api.store.services.service_projections import project_order
from app.utils.logger import logger


def merge_order_lines(lines: List[OrderProductIn]) -> Dict[int, int]:
    """product_id -> quantity; a product requested twice has its quantities added."""
    merged: Dict[int, int] = {}
    for line in lines:
        merged[line.product_id] = merged.get(line.product_id, 0) + line.quantity
    return merged


def partition_order_lines(
    quantities: Dict[int, int],
    products_by_id: Dict[int, ProductModel],
) -> Tuple[List[Tuple[ProductModel, int]], List[int]]:
    """
    Splits the requested lines into (resolved (product, quantity) pairs,
    unresolved product ids), keeping the request order.
    """
    resolved: List[Tuple[ProductModel, int]] = []
    unresolved: List[int] = []
    for product_id, quantity in quantities.items():
        product = products_by_id.get(product_id)
        if product is None:
            unresolved.append(product_id)
        else:
            resolved.append((product, quantity))
    return resolved, unresolved


class OrdersService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = OrderRepository(db)
        self.repo_products = ProductRepository(db)

    def get_order(self, order_id: int) -> OrderOut:
        order = self.repo.get_by_id(order_id)
        if not order:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
        return project_order(order)

    def list_orders(self, order_date: Optional[date] = None) -> List[OrderOut]:
        return [project_order(o) for o in self.repo.list(order_date)]

    def delete_order(self, order_id: int) -> None:
        order = self.repo.get_plain(order_id)
        if not order:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
        self.repo.delete(order)
        logger.info(f"[Orders] Deleted id={order_id}")

    def create_order(self, data: OrderCreate) -> OrderOut:
        quantities = merge_order_lines(data.order_products)
        products = self.repo_products.list_by_ids(list(quantities))
        resolved, unresolved = partition_order_lines(quantities, {p.id: p for p in products})

        if unresolved:
            logger.warning(f"[Orders] Dropping lines with unknown product ids: {unresolved}")

        order = OrderModel(
            cashier_id=data.cashier_id,
            paid_on_date=data.paid_on_date,
            order_products=[
                OrderProductModel(product_id=product.id, product=product, quantity=quantity)
                for product, quantity in resolved
            ],
        )
        try:
            order = self.repo.create(order)
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"[Orders] Create failed for cashier_id={data.cashier_id}: {e.orig}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Could not create order")

        logger.info(f"[Orders] Created id={order.id} cashier_id={data.cashier_id} lines={len(resolved)}")
        return self.get_order(order.id)
