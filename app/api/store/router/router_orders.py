from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.orm import Session

from app.api.store.schemas.schema_order import OrderCreate, OrderOut
from app.api.store.services.service_orders import OrdersService
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(prefix="/orders", tags=["Store - Orders"])


@router.get("", response_model=List[OrderOut])
def list_orders(
    order_date: Optional[date] = Query(None, description="Only orders paid on this day (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
):
    return OrdersService(db).list_orders(order_date)


@router.get("/{order_id}", response_model=OrderOut)
def get_order(
    order_id: int = Path(..., description="Order ID"),
    db: Session = Depends(get_db),
):
    return OrdersService(db).get_order(order_id)


@router.post("", response_model=OrderOut, status_code=status.HTTP_201_CREATED)
def create_order(request: OrderCreate, db: Session = Depends(get_db)):
    logger.info(f"[Orders] Creating - cashier_id={request.cashier_id} lines={len(request.order_products)}")
    return OrdersService(db).create_order(request)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_order(
    order_id: int = Path(..., description="Order ID"),
    db: Session = Depends(get_db),
):
    logger.info(f"[Orders] Deleting ID={order_id}")
    OrdersService(db).delete_order(order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
