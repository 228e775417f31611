"""
Initializer of the store domain: creates its tables and seeds the baseline
dataset on an empty store.
"""
import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import Table, func, text

from app.api.store.models import (
    CashierModel,
    CategoryModel,
    OrderModel,
    OrderProductModel,
    ProductModel,
)
from app.config.settings import SEED_DATABASE
from app.database.domain.base import DomainInitializer
from app.database.domain.registry import register_domain

logger = logging.getLogger(__name__)

SEED_CATEGORIES = [
    (1, "Beverages"),
    (2, "Snacks"),
    (3, "Personal Care"),
    (4, "Household"),
]

SEED_PRODUCTS = [
    (1, "Cola", Decimal("1.99"), "Coca-Cola", 1),
    (2, "Potato Chips", Decimal("2.99"), "Lays", 2),
    (3, "Toothpaste", Decimal("3.99"), "Colgate", 3),
    (4, "Paper Towels", Decimal("4.99"), "Bounty", 4),
    (5, "Energy Drink", Decimal("2.99"), "Red Bull", 1),
    (6, "Chocolate Bar", Decimal("1.50"), "Hershey's", 2),
]

SEED_CASHIERS = [
    (1, "John", "Doe"),
    (2, "Jane", "Smith"),
]

SEED_ORDERS = [
    (1, 1, datetime(2024, 2, 5, 10, 30)),
    (2, 2, datetime(2024, 2, 5, 14, 45)),
]

# (order_id, product_id, quantity)
SEED_ORDER_PRODUCTS = [
    (1, 1, 2),
    (1, 2, 1),
    (2, 3, 1),
    (2, 4, 2),
]

# tables whose ids are inserted explicitly by the seed
_SERIAL_TABLES = ["categories", "products", "cashiers", "orders"]


class StoreInitializer(DomainInitializer):
    """Initializer of the store domain."""

    def __init__(self, engine=None, session_factory=None, seed: Optional[bool] = None):
        super().__init__(engine=engine, session_factory=session_factory)
        self.seed = SEED_DATABASE if seed is None else seed

    def get_domain_name(self) -> str:
        return "store"

    def get_tables(self) -> List[Table]:
        return [
            CategoryModel.__table__,
            ProductModel.__table__,
            CashierModel.__table__,
            OrderModel.__table__,
            OrderProductModel.__table__,
        ]

    def initialize_data(self) -> None:
        if not self.seed:
            logger.info("  ℹ️ Seeding disabled. Skipping baseline data.")
            return

        with self.session_factory() as session:
            if session.query(func.count(CategoryModel.id)).scalar():
                logger.info("  ℹ️ Store already has data. Skipping baseline data.")
                return

            session.add_all([CategoryModel(id=i, category_name=name) for i, name in SEED_CATEGORIES])
            session.add_all([
                ProductModel(id=i, product_name=name, price=price, brand=brand, category_id=cat)
                for i, name, price, brand, cat in SEED_PRODUCTS
            ])
            session.add_all([CashierModel(id=i, first_name=first, last_name=last) for i, first, last in SEED_CASHIERS])
            session.flush()
            session.add_all([
                OrderModel(id=i, cashier_id=cashier_id, paid_on_date=paid)
                for i, cashier_id, paid in SEED_ORDERS
            ])
            session.flush()
            session.add_all([
                OrderProductModel(order_id=order_id, product_id=product_id, quantity=qty)
                for order_id, product_id, qty in SEED_ORDER_PRODUCTS
            ])
            session.commit()

            if self.engine.dialect.name == "postgresql":
                self._sync_sequences(session)

        logger.info(
            f"  ✅ Baseline data seeded: {len(SEED_CATEGORIES)} categories, {len(SEED_PRODUCTS)} products, "
            f"{len(SEED_CASHIERS)} cashiers, {len(SEED_ORDERS)} orders."
        )

    def _sync_sequences(self, session) -> None:
        """Moves the PostgreSQL id sequences past the explicitly inserted ids."""
        for table in _SERIAL_TABLES:
            session.execute(
                text(
                    f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
                    f"(SELECT COALESCE(MAX(id), 1) FROM {table}))"
                )
            )
        session.commit()

    def validate(self) -> bool:
        if not self.seed:
            return True
        with self.session_factory() as session:
            return bool(session.query(func.count(ProductModel.id)).scalar())


# Creates and registers the initializer instance
register_domain(StoreInitializer())
