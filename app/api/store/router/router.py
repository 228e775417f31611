from fastapi import APIRouter

from app.api.store.router.router_cashiers import router as router_cashiers
from app.api.store.router.router_categories import router as router_categories
from app.api.store.router.router_orders import router as router_orders
from app.api.store.router.router_products import router as router_products

api_store = APIRouter(
    prefix="/api",
    tags=["API - Store"]
)

api_store.include_router(router_cashiers)
api_store.include_router(router_categories)
api_store.include_router(router_products)
api_store.include_router(router_orders)
