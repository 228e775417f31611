from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.orm import Session

from app.api.store.schemas.schema_product import ProductCreate, ProductOut, ProductUpdate
from app.api.store.services.service_products import ProductsService
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(prefix="/products", tags=["Store - Products"])


@router.get("", response_model=List[ProductOut])
def list_products(
    search: Optional[str] = Query(None, description="Case-insensitive match on product or category name"),
    db: Session = Depends(get_db),
):
    return ProductsService(db).search_products(search)


@router.get("/{product_id}", response_model=ProductOut)
def get_product(
    product_id: int = Path(..., description="Product ID"),
    db: Session = Depends(get_db),
):
    return ProductsService(db).get_product(product_id)


@router.post("", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
def create_product(request: ProductCreate, db: Session = Depends(get_db)):
    logger.info(f"[Products] Creating - name={request.product_name} category_id={request.category_id}")
    return ProductsService(db).create_product(request)


@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_product(
    request: ProductUpdate,
    product_id: int = Path(..., description="Product ID"),
    db: Session = Depends(get_db),
):
    logger.info(f"[Products] Updating ID={product_id}")
    ProductsService(db).update_product(product_id, request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
