from decimal import Decimal


# ---------- Cashiers ----------

def test_get_cashier_with_nested_orders(client):
    resp = client.get("/api/cashiers/1")
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["full_name"] == "John Doe"
    assert [o["id"] for o in body["orders"]] == [1]

    order = body["orders"][0]
    assert "cashier" not in order
    assert Decimal(order["total"]) == Decimal("6.97")
    assert [(line["product"]["product_name"], line["quantity"]) for line in order["order_products"]] == [
        ("Cola", 2),
        ("Potato Chips", 1),
    ]
    assert order["order_products"][0]["product"]["category"] == {"id": 1, "category_name": "Beverages"}


def test_get_missing_cashier_returns_404(client):
    resp = client.get("/api/cashiers/999")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Cashier not found"


def test_create_cashier(client):
    resp = client.post("/api/cashiers", json={"first_name": "Ada", "last_name": "Lovelace"})
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["full_name"] == "Ada Lovelace"
    assert body["orders"] == []
    assert client.get(f"/api/cashiers/{body['id']}").status_code == 200


def test_create_cashier_requires_names(client):
    resp = client.post("/api/cashiers", json={"first_name": "Ada"})
    assert resp.status_code == 422


# ---------- Categories ----------

def test_list_categories(client):
    resp = client.get("/api/categories")
    assert resp.status_code == 200
    assert [c["category_name"] for c in resp.json()] == ["Beverages", "Snacks", "Personal Care", "Household"]


# ---------- Products ----------

def test_list_all_products(client):
    resp = client.get("/api/products")
    assert resp.status_code == 200
    assert len(resp.json()) == 6


def test_search_products_by_product_name(client):
    resp = client.get("/api/products", params={"search": "choc"})
    assert [p["product_name"] for p in resp.json()] == ["Chocolate Bar"]


def test_search_products_by_category_name_is_case_insensitive(client):
    for term in ("beverages", "BEVERAGES", "Bever"):
        resp = client.get("/api/products", params={"search": term})
        assert [p["product_name"] for p in resp.json()] == ["Cola", "Energy Drink"]


def test_search_products_without_match(client):
    resp = client.get("/api/products", params={"search": "caviar"})
    assert resp.json() == []


def test_search_products_treats_wildcards_literally(client):
    for term in ("_", "%", "\\"):
        resp = client.get("/api/products", params={"search": term})
        assert resp.json() == [], term


def test_search_products_keeps_surrounding_spaces(client):
    resp = client.get("/api/products", params={"search": "bar "})
    assert resp.json() == []

    resp = client.get("/api/products", params={"search": " bar"})
    assert [p["product_name"] for p in resp.json()] == ["Chocolate Bar"]


def test_search_products_with_blank_term_lists_all(client):
    resp = client.get("/api/products", params={"search": "   "})
    assert len(resp.json()) == 6


def test_get_product(client):
    resp = client.get("/api/products/6")
    assert resp.status_code == 200
    body = resp.json()
    assert Decimal(body["price"]) == Decimal("1.50")
    assert body["category"]["category_name"] == "Snacks"
    assert client.get("/api/products/999").status_code == 404


def test_create_product(client):
    payload = {"product_name": "Gum", "price": "0.99", "brand": "Trident", "category_id": 2}
    resp = client.post("/api/products", json=payload)
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["product_name"] == "Gum"
    assert Decimal(body["price"]) == Decimal("0.99")
    assert body["category"] == {"id": 2, "category_name": "Snacks"}


def test_create_product_with_unknown_category_fails(client):
    payload = {"product_name": "Gum", "price": "0.99", "brand": "Trident", "category_id": 42}
    resp = client.post("/api/products", json=payload)
    assert resp.status_code == 400


def test_create_product_with_negative_price_fails(client):
    payload = {"product_name": "Gum", "price": "-1", "brand": "Trident", "category_id": 2}
    assert client.post("/api/products", json=payload).status_code == 422


def test_product_price_allows_two_decimal_places(client):
    payload = {"product_name": "Gum", "price": "0.999", "brand": "Trident", "category_id": 2}
    assert client.post("/api/products", json=payload).status_code == 422
    assert client.put("/api/products/1", json=payload).status_code == 422
    assert Decimal(client.get("/api/products/1").json()["price"]) == Decimal("1.99")


def test_update_product_changes_live_order_totals(client):
    payload = {"product_name": "Cola Zero", "price": "2.49", "brand": "Coca-Cola", "category_id": 1}
    resp = client.put("/api/products/1", json=payload)
    assert resp.status_code == 204

    assert client.get("/api/products/1").json()["product_name"] == "Cola Zero"
    # 2.49 * 2 + 2.99
    assert Decimal(client.get("/api/orders/1").json()["total"]) == Decimal("7.97")


def test_update_missing_product_returns_404(client):
    payload = {"product_name": "X", "price": "1.00", "brand": "Y", "category_id": 1}
    assert client.put("/api/products/999", json=payload).status_code == 404


def test_update_product_with_unknown_category_fails(client):
    payload = {"product_name": "Cola", "price": "1.99", "brand": "Coca-Cola", "category_id": 42}
    assert client.put("/api/products/1", json=payload).status_code == 400
    assert client.get("/api/products/1").json()["category"]["id"] == 1


# ---------- Orders ----------

def test_get_order_embeds_cashier(client):
    resp = client.get("/api/orders/2")
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert Decimal(body["total"]) == Decimal("13.97")
    assert body["paid_on_date"] == "2024-02-05T14:45:00"
    assert body["cashier"] == {"id": 2, "first_name": "Jane", "last_name": "Smith", "full_name": "Jane Smith"}


def test_get_missing_order_returns_404(client):
    resp = client.get("/api/orders/999")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Order not found"


def test_list_orders(client):
    resp = client.get("/api/orders")
    assert resp.status_code == 200
    assert [Decimal(o["total"]) for o in resp.json()] == [Decimal("6.97"), Decimal("13.97")]


def test_list_orders_by_paid_date(client):
    resp = client.get("/api/orders", params={"order_date": "2024-02-05"})
    assert [o["id"] for o in resp.json()] == [1, 2]

    resp = client.get("/api/orders", params={"order_date": "2024-02-06"})
    assert resp.json() == []


def test_unpaid_orders_never_match_a_date(client):
    client.post("/api/orders", json={"cashier_id": 1, "order_products": [{"product_id": 1, "quantity": 1}]})
    resp = client.get("/api/orders", params={"order_date": "2024-02-05"})
    assert [o["id"] for o in resp.json()] == [1, 2]
    assert len(client.get("/api/orders").json()) == 3


def test_create_order_drops_unknown_products_and_merges_duplicates(client):
    payload = {
        "cashier_id": 1,
        "paid_on_date": "2024-03-01T09:00:00",
        "order_products": [
            {"product_id": 5, "quantity": 1},
            {"product_id": 999, "quantity": 3},
            {"product_id": 5, "quantity": 2},
        ],
    }
    resp = client.post("/api/orders", json=payload)
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["cashier"]["full_name"] == "John Doe"
    assert [(line["product"]["id"], line["quantity"]) for line in body["order_products"]] == [(5, 3)]
    assert Decimal(body["total"]) == Decimal("8.97")

    nested = client.get("/api/cashiers/1").json()["orders"]
    assert [o["id"] for o in nested] == [1, body["id"]]


def test_create_order_without_lines(client):
    resp = client.post("/api/orders", json={"cashier_id": 2})
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["order_products"] == []
    assert Decimal(body["total"]) == Decimal("0")
    assert body["paid_on_date"] is None


def test_create_order_requires_cashier(client):
    resp = client.post("/api/orders", json={"order_products": [{"product_id": 1, "quantity": 1}]})
    assert resp.status_code == 422


def test_create_order_for_unknown_cashier_fails(client):
    resp = client.post("/api/orders", json={"cashier_id": 999, "order_products": [{"product_id": 1, "quantity": 1}]})
    assert resp.status_code == 400
    assert len(client.get("/api/orders").json()) == 2


def test_create_order_rejects_non_positive_quantity(client):
    resp = client.post("/api/orders", json={"cashier_id": 1, "order_products": [{"product_id": 1, "quantity": 0}]})
    assert resp.status_code == 422


def test_delete_order(client):
    resp = client.delete("/api/orders/1")
    assert resp.status_code == 204

    assert client.get("/api/orders/1").status_code == 404
    assert client.get("/api/cashiers/1").json()["orders"] == []
    assert client.delete("/api/orders/1").status_code == 404


# ---------- Ambient ----------

def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_metrics_count_requests(client):
    client.get("/api/orders/1")
    resp = client.get("/api/monitoring/metrics")
    assert resp.status_code == 200
    assert 'endpoint="/api/orders/{id}"' in resp.text
