from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from app.api.store.schemas.schema_cashier import CashierCreate, CashierOut
from app.api.store.services.service_cashiers import CashiersService
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(prefix="/cashiers", tags=["Store - Cashiers"])


@router.post("", response_model=CashierOut, status_code=status.HTTP_201_CREATED)
def create_cashier(request: CashierCreate, db: Session = Depends(get_db)):
    logger.info(f"[Cashiers] Creating - first_name={request.first_name} last_name={request.last_name}")
    return CashiersService(db).create_cashier(request)


@router.get("/{cashier_id}", response_model=CashierOut)
def get_cashier(
    cashier_id: int = Path(..., description="Cashier ID"),
    db: Session = Depends(get_db),
):
    return CashiersService(db).get_cashier(cashier_id)
