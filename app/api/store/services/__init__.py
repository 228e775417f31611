"""
Services of the store domain.
"""

from .service_cashiers import CashiersService
from .service_categories import CategoriesService
from .service_orders import OrdersService
from .service_products import ProductsService

__all__ = [
    "CashiersService",
    "CategoriesService",
    "OrdersService",
    "ProductsService",
]
