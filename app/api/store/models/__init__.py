# Imports every store model so they are registered on Base.metadata
from app.api.store.models.model_category import CategoryModel
from app.api.store.models.model_product import ProductModel
from app.api.store.models.model_cashier import CashierModel
from app.api.store.models.model_order import OrderModel
from app.api.store.models.model_order_product import OrderProductModel

__all__ = [
    "CategoryModel",
    "ProductModel",
    "CashierModel",
    "OrderModel",
    "OrderProductModel",
]
