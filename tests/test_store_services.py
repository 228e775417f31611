from decimal import Decimal

import pytest
from fastapi import HTTPException

from app.api.store.models import CategoryModel, ProductModel
from app.api.store.database.initializer import StoreInitializer
from app.api.store.schemas.schema_order import OrderCreate, OrderProductIn
from app.api.store.services import OrdersService, ProductsService
from app.api.store.services.service_orders import merge_order_lines, partition_order_lines


def test_merge_order_lines_accumulates_quantities():
    lines = [
        OrderProductIn(product_id=1, quantity=2),
        OrderProductIn(product_id=2, quantity=1),
        OrderProductIn(product_id=1, quantity=3),
    ]
    assert merge_order_lines(lines) == {1: 5, 2: 1}


def test_partition_order_lines_splits_resolved_and_unresolved():
    cola = ProductModel(id=1, product_name="Cola", price=Decimal("1.99"), brand="Coca-Cola", category_id=1)
    resolved, unresolved = partition_order_lines({1: 2, 7: 1, 8: 4}, {1: cola})
    assert resolved == [(cola, 2)]
    assert unresolved == [7, 8]


def test_orders_service_get_missing_raises_404(db):
    with pytest.raises(HTTPException) as exc:
        OrdersService(db).get_order(999)
    assert exc.value.status_code == 404


def test_orders_service_create_with_only_unknown_products(db):
    out = OrdersService(db).create_order(
        OrderCreate(cashier_id=1, order_products=[OrderProductIn(product_id=404, quantity=2)])
    )
    assert out.order_products == []
    assert out.total == Decimal("0")
    assert out.cashier.full_name == "John Doe"


def test_products_service_search_is_substring_match(db):
    names = [p.product_name for p in ProductsService(db).search_products("chips")]
    assert names == ["Potato Chips"]


def test_initializer_seeds_only_once(engine, session_factory):
    StoreInitializer(engine=engine, session_factory=session_factory, seed=True).initialize()
    with session_factory() as session:
        assert session.query(CategoryModel).count() == 4
        assert session.query(ProductModel).count() == 6


def test_initializer_without_seed_creates_empty_tables(engine):
    from sqlalchemy.orm import sessionmaker

    factory = sessionmaker(bind=engine)
    StoreInitializer(engine=engine, session_factory=factory, seed=False).initialize()
    with factory() as session:
        assert session.query(CategoryModel).count() == 0
