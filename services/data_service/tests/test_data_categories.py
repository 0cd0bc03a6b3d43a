def create_category(client, name="Electronics", description="Devices"):
    resp = client.post("/data/categories/", json={"name": name, "description": description})
    assert resp.status_code == 201
    return resp.json()


def test_list_categories_empty(data_client):
    resp = data_client.get("/data/categories/")
    assert resp.status_code == 200
    assert resp.json() == []


def test_create_then_get_round_trips_fields(data_client):
    created = create_category(data_client)
    resp = data_client.get(f"/data/categories/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"id": created["id"], "name": "Electronics", "description": "Devices"}


def test_get_by_name_ignores_case(data_client):
    created = create_category(data_client)
    resp = data_client.get("/data/categories/name/electronics")
    assert resp.status_code == 200
    assert resp.json()["id"] == created["id"]


def test_unknown_category_is_404_with_error_body(data_client):
    resp = data_client.get("/data/categories/999")
    assert resp.status_code == 404
    body = resp.json()
    assert body["status"] == 404
    assert body["error"] == "Not Found"
    assert body["message"] == "Category not found with id: 999"
    assert body["path"] == "/data/categories/999"
    assert "timestamp" in body


def test_duplicate_name_is_conflict(data_client):
    create_category(data_client, name="Books")
    resp = data_client.post("/data/categories/", json={"name": "books"})
    assert resp.status_code == 409
    assert "already exists" in resp.json()["message"]


def test_blank_name_is_bad_request(data_client):
    resp = data_client.post("/data/categories/", json={"name": "   "})
    assert resp.status_code == 400
    body = resp.json()
    assert body["message"] == "Validation failed"
    assert body["errors"]["name"] == "Category name is required"


def test_search_returns_only_matching(data_client):
    create_category(data_client, name="Home Appliances")
    create_category(data_client, name="Garden")
    resp = data_client.get("/data/categories/search", params={"name": "appl"})
    assert [c["name"] for c in resp.json()] == ["Home Appliances"]


def test_update_allows_recasing_own_name(data_client):
    created = create_category(data_client, name="toys")
    resp = data_client.put(f"/data/categories/{created['id']}", json={"name": "Toys", "description": None})
    assert resp.status_code == 200
    assert resp.json()["name"] == "Toys"


def test_update_onto_other_name_is_conflict(data_client):
    create_category(data_client, name="Toys")
    other = create_category(data_client, name="Games")
    resp = data_client.put(f"/data/categories/{other['id']}", json={"name": "TOYS"})
    assert resp.status_code == 409


def test_delete_then_get_is_404(data_client):
    created = create_category(data_client)
    assert data_client.delete(f"/data/categories/{created['id']}").status_code == 204
    assert data_client.get(f"/data/categories/{created['id']}").status_code == 404


def test_delete_category_removes_its_products_and_inventory(data_client):
    category = create_category(data_client)
    product = data_client.post(
        "/data/products/", json={"name": "Phone", "price": 299.0, "category_id": category["id"]}
    ).json()
    data_client.post("/data/inventory/", json={"product_id": product["id"], "quantity": 4, "location": "A"})

    assert data_client.delete(f"/data/categories/{category['id']}").status_code == 204

    assert data_client.get(f"/data/products/{product['id']}").status_code == 404
    assert data_client.get("/data/inventory/").json() == []


def test_non_numeric_id_is_bad_request(data_client):
    resp = data_client.get("/data/categories/abc")
    assert resp.status_code == 400
    assert "category_id" in resp.json()["errors"]


def test_search_treats_wildcards_literally(data_client):
    create_category(data_client, name="Home_Office")
    create_category(data_client, name="HomeXOffice")
    create_category(data_client, name="Outdoor")
    resp = data_client.get("/data/categories/search", params={"name": "e_O"})
    assert [c["name"] for c in resp.json()] == ["Home_Office"]
    assert data_client.get("/data/categories/search", params={"name": "%"}).json() == []


def test_get_by_name_with_reserved_characters(data_client):
    created = create_category(data_client, name="C# Books")
    resp = data_client.get("/data/categories/name/c%23%20books")
    assert resp.status_code == 200
    assert resp.json()["id"] == created["id"]
