from .repo_cashiers import CashierRepository
from .repo_categories import CategoryRepository
from .repo_orders import OrderRepository
from .repo_products import ProductRepository

__all__ = [
    "CashierRepository",
    "CategoryRepository",
    "OrderRepository",
    "ProductRepository",
]
