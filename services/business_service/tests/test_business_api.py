"""Business service end to end against the in-process data service."""

import pytest


@pytest.fixture
def laptop(business_client):
    category = business_client.post("/api/categories/", json={"name": "Computers"}).json()
    product = business_client.post(
        "/api/products/",
        json={"name": "Laptop", "description": "14 inch", "price": 999.0, "category_id": category["id"]},
    ).json()
    return {"category": category, "product": product}


def test_create_then_get_category(business_client):
    resp = business_client.post("/api/categories/", json={"name": "Audio", "description": "Sound"})
    assert resp.status_code == 201
    created = resp.json()
    assert business_client.get(f"/api/categories/{created['id']}").json() == {
        "id": created["id"],
        "name": "Audio",
        "description": "Sound",
    }


def test_product_dto_shape(business_client, laptop):
    body = business_client.get(f"/api/products/{laptop['product']['id']}").json()
    assert body == {
        "id": laptop["product"]["id"],
        "name": "Laptop",
        "description": "14 inch",
        "price": 999.0,
        "category": {"id": laptop["category"]["id"], "name": "Computers", "description": None},
    }


def test_inventory_dto_nests_product(business_client, laptop):
    resp = business_client.post(
        "/api/inventory/",
        json={"product_id": laptop["product"]["id"], "quantity": 3, "location": "Berlin"},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert set(body) == {"id", "product", "quantity", "location"}
    assert body["product"]["name"] == "Laptop"
    assert body["product"]["category"]["name"] == "Computers"


def test_duplicate_category_is_conflict(business_client):
    business_client.post("/api/categories/", json={"name": "Games"})
    resp = business_client.post("/api/categories/", json={"name": "Games"})
    assert resp.status_code == 409
    body = resp.json()
    assert body["status"] == 409
    assert body["message"] == "Category already exists with name: Games"
    assert body["path"] == "/api/categories/"


def test_invalid_price_is_rejected_before_forwarding(business_client):
    resp = business_client.post("/api/products/", json={"name": "Freebie", "price": 0})
    assert resp.status_code == 400
    assert "price" in resp.json()["errors"]


def test_invalid_quantity_is_bad_request(business_client, laptop):
    row = business_client.post(
        "/api/inventory/",
        json={"product_id": laptop["product"]["id"], "quantity": 3, "location": "Berlin"},
    ).json()
    resp = business_client.patch(f"/api/inventory/{row['id']}/quantity/-1")
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid quantity"


def test_missing_product_is_404(business_client):
    resp = business_client.get("/api/products/4242")
    assert resp.status_code == 404
    assert resp.json()["message"] == "Product not found with id: 4242"


def test_search_and_filters(business_client, laptop):
    business_client.post("/api/products/", json={"name": "Mouse", "price": 25.0})
    assert [p["name"] for p in business_client.get("/api/products/search", params={"name": "lap"}).json()] == [
        "Laptop"
    ]
    assert [p["name"] for p in business_client.get("/api/products/price/max/100").json()] == ["Mouse"]
    resp = business_client.get("/api/products/price/range", params={"min_price": 500, "max_price": 1000})
    assert [p["name"] for p in resp.json()] == ["Laptop"]
    resp = business_client.get("/api/products/category/name/computers")
    assert [p["name"] for p in resp.json()] == ["Laptop"]


def test_assign_and_remove_category(business_client, laptop):
    mouse = business_client.post("/api/products/", json={"name": "Mouse", "price": 25.0}).json()
    resp = business_client.put(f"/api/products/{mouse['id']}/category/{laptop['category']['id']}")
    assert resp.json()["category"]["name"] == "Computers"
    resp = business_client.delete(f"/api/products/{mouse['id']}/category")
    assert resp.json()["category"] is None


def test_delete_product_then_get_is_404(business_client, laptop):
    product_id = laptop["product"]["id"]
    business_client.post("/api/inventory/", json={"product_id": product_id, "quantity": 1, "location": "Oslo"})
    assert business_client.delete(f"/api/products/{product_id}").status_code == 204
    assert business_client.get(f"/api/products/{product_id}").status_code == 404
    assert business_client.get("/api/inventory/").json() == []


def test_inventory_queries(business_client, laptop):
    product_id = laptop["product"]["id"]
    for quantity, location in [(0, "Oslo"), (20, "Rome")]:
        business_client.post(
            "/api/inventory/", json={"product_id": product_id, "quantity": quantity, "location": location}
        )
    assert [r["location"] for r in business_client.get("/api/inventory/out-of-stock").json()] == ["Oslo"]
    assert [r["location"] for r in business_client.get("/api/inventory/location/rome").json()] == ["Rome"]
    assert len(business_client.get(f"/api/inventory/product/{product_id}").json()) == 2
    assert len(business_client.get(f"/api/inventory/category/{laptop['category']['id']}").json()) == 2
    resp = business_client.get("/api/inventory/quantity/range", params={"min_quantity": 1, "max_quantity": 50})
    assert [r["quantity"] for r in resp.json()] == [20]


def test_product_stock_sums_all_locations(business_client, laptop):
    product_id = laptop["product"]["id"]
    for quantity, location in [(4, "Rome"), (3, "Oslo"), (2, "Rome")]:
        business_client.post(
            "/api/inventory/", json={"product_id": product_id, "quantity": quantity, "location": location}
        )
    resp = business_client.get(f"/api/products/{product_id}/stock")
    assert resp.status_code == 200
    body = resp.json()
    assert body["stock_quantity"] == 9
    assert body["is_low_stock"] is True
    assert body["location"] == "Oslo, Rome"
    assert body["category"]["name"] == "Computers"
    assert "last_updated" in body


def test_product_stock_without_inventory(business_client, laptop):
    body = business_client.get(f"/api/products/{laptop['product']['id']}/stock").json()
    assert body["stock_quantity"] == 0
    assert body["location"] is None


def test_root_and_info(business_client):
    assert business_client.get("/").json()["service"] == "business-service"
    assert business_client.get("/info").json()["endpoints"]["products"] == "/api/products"


def test_category_name_with_reserved_characters(business_client):
    created = business_client.post("/api/categories/", json={"name": "C#"}).json()
    resp = business_client.get("/api/categories/name/C%23")
    assert resp.status_code == 200
    assert resp.json()["id"] == created["id"]
    assert resp.json()["name"] == "C#"


def test_missing_category_name_reports_decoded_path(business_client):
    resp = business_client.get("/api/categories/name/F%23")
    assert resp.status_code == 404
    body = resp.json()
    assert body["message"] == "Category not found with name: F#"
    assert body["path"] == "/api/categories/name/F#"


def test_products_by_category_name_with_spaces(business_client):
    category = business_client.post("/api/categories/", json={"name": "Home & Garden"}).json()
    business_client.post("/api/products/", json={"name": "Rake", "price": 12.5, "category_id": category["id"]})
    resp = business_client.get("/api/products/category/name/Home%20%26%20Garden")
    assert [p["name"] for p in resp.json()] == ["Rake"]


def test_inventory_location_with_question_mark(business_client, laptop):
    business_client.post(
        "/api/inventory/", json={"product_id": laptop["product"]["id"], "quantity": 2, "location": "Bay 3?"}
    )
    business_client.post(
        "/api/inventory/", json={"product_id": laptop["product"]["id"], "quantity": 5, "location": "Bay 3"}
    )
    resp = business_client.get("/api/inventory/location/Bay%203%3F")
    assert resp.status_code == 200
    assert [(r["location"], r["quantity"]) for r in resp.json()] == [("Bay 3?", 2)]


def test_inventory_product_name_with_percent(business_client):
    for name in ["100% Cotton Shirt", "1000 Cotton Buds"]:
        product = business_client.post("/api/products/", json={"name": name, "price": 4.0}).json()
        business_client.post("/api/inventory/", json={"product_id": product["id"], "quantity": 1, "location": "Oslo"})
    resp = business_client.get("/api/inventory/product/name/100%25%20Cotton")
    assert [r["product"]["name"] for r in resp.json()] == ["100% Cotton Shirt"]


@pytest.mark.parametrize("price", [0.001, 100000000])
def test_price_outside_column_precision_is_rejected(business_client, price):
    resp = business_client.post("/api/products/", json={"name": "Odd", "price": price})
    assert resp.status_code == 400
    assert "price" in resp.json()["errors"]
    assert business_client.get("/api/products/").json() == []


def test_two_decimal_price_is_forwarded_exactly(business_client):
    resp = business_client.post("/api/products/", json={"name": "Pen", "price": 0.01})
    assert resp.status_code == 201
    assert resp.json()["price"] == 0.01
