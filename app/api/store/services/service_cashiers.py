from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.api.store.models.model_cashier import CashierModel
from app.api.store.repositories.repo_cashiers import CashierRepository
from app.api.store.schemas.schema_cashier import CashierCreate, CashierOut
from app.api.store.services.service_projections import project_cashier
from app.utils.logger import logger


class CashiersService:
    def __init__(self, db: Session):
        self.repo = CashierRepository(db)

    def get_cashier(self, cashier_id: int) -> CashierOut:
        cashier = self.repo.get_with_orders(cashier_id)
        if not cashier:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cashier not found")
        return project_cashier(cashier)

    def create_cashier(self, data: CashierCreate) -> CashierOut:
        cashier = self.repo.create(
            CashierModel(first_name=data.first_name, last_name=data.last_name)
        )
        logger.info(f"[Cashiers] Created id={cashier.id} name={cashier.full_name}")
        return project_cashier(cashier)
