"""API endpoint tests."""

from datetime import date, timedelta


def create_item(client, category_id, **overrides):
    payload = {"name": "Milk", "quantity": 2, "categoryId": category_id}
    payload.update(overrides)
    response = client.post("/api/v1/items", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


# --- Categories ---


def test_create_category(client):
    response = client.post("/api/v1/categories", json={"name": "  Dairy  "})
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Dairy"
    assert len(data["id"]) == 26


def test_create_existing_category_returns_it(client):
    """Creating a category that differs only in case returns the existing one."""
    first = client.post("/api/v1/categories", json={"name": "Dairy"}).json()

    response = client.post("/api/v1/categories", json={"name": "dairy"})
    assert response.status_code == 200
    assert response.json()["id"] == first["id"]
    assert response.json()["name"] == "Dairy"
    assert len(client.get("/api/v1/categories").json()) == 1


def test_create_category_blank_name(client):
    response = client.post("/api/v1/categories", json={"name": "   "})
    assert response.status_code == 422


def test_list_categories_sorted(client):
    for name in ("Vegetables", "dairy", "Fruits"):
        client.post("/api/v1/categories", json={"name": name})

    response = client.get("/api/v1/categories")
    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["dairy", "Fruits", "Vegetables"]


# --- Items ---


def test_create_item(client, categories):
    data = create_item(
        client,
        categories["Dairy"].id,
        name="Milk",
        quantity=3,
        expirationDate="2026-01-17T00:00:00.000Z",
    )
    assert data["name"] == "Milk"
    assert data["quantity"] == 3
    assert data["categoryId"] == categories["Dairy"].id
    assert data["category"]["name"] == "Dairy"
    assert data["expirationDate"] == "2026-01-17"


def test_create_item_empty_expiration_date(client, categories):
    data = create_item(client, categories["Dairy"].id, expirationDate="")
    assert data["expirationDate"] is None


def test_create_item_unknown_category(client):
    response = client.post(
        "/api/v1/items", json={"name": "Milk", "quantity": 1, "categoryId": "nope"}
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Category not found"


def test_create_item_validation(client, categories):
    category_id = categories["Dairy"].id
    bad_payloads = [
        {"name": "", "quantity": 1, "categoryId": category_id},
        {"name": "Milk", "quantity": -1, "categoryId": category_id},
        {"name": "Milk", "quantity": "lots", "categoryId": category_id},
        {"name": "Milk", "quantity": 1, "categoryId": category_id, "expirationDate": "soon"},
        {"name": "Milk", "categoryId": category_id},
    ]
    for payload in bad_payloads:
        response = client.post("/api/v1/items", json=payload)
        assert response.status_code == 422, payload


def test_list_items_in_creation_order(client, categories):
    for name in ("Milk", "Cheese", "Butter"):
        create_item(client, categories["Dairy"].id, name=name)

    response = client.get("/api/v1/items")
    assert response.status_code == 200
    assert [i["name"] for i in response.json()] == ["Milk", "Cheese", "Butter"]


def test_list_items_search_and_filter(client, categories):
    create_item(client, categories["Dairy"].id, name="Whole Milk")
    create_item(client, categories["Dairy"].id, name="Cheddar")
    create_item(client, categories["Grains"].id, name="Oat Milk")

    response = client.get("/api/v1/items", params={"search": "milk"})
    assert {i["name"] for i in response.json()} == {"Whole Milk", "Oat Milk"}

    response = client.get("/api/v1/items", params={"category_id": categories["Dairy"].id})
    assert {i["name"] for i in response.json()} == {"Whole Milk", "Cheddar"}

    response = client.get(
        "/api/v1/items", params={"search": "MILK", "category_id": categories["Grains"].id}
    )
    assert [i["name"] for i in response.json()] == ["Oat Milk"]


def test_get_item(client, categories):
    item = create_item(client, categories["Dairy"].id)

    response = client.get(f"/api/v1/items/{item['id']}")
    assert response.status_code == 200
    assert response.json()["name"] == "Milk"


def test_item_not_found(client):
    assert client.get("/api/v1/items/01HZZZZZZZZZZZZZZZZZZZZZZZ").status_code == 404
    assert client.put("/api/v1/items/missing", json={"quantity": 1}).status_code == 404
    assert client.delete("/api/v1/items/missing").status_code == 404


def test_update_item_partial(client, categories):
    item = create_item(client, categories["Dairy"].id, expirationDate="2026-02-01")

    response = client.put(f"/api/v1/items/{item['id']}", json={"quantity": 7})
    assert response.status_code == 200
    data = response.json()
    assert data["quantity"] == 7
    assert data["name"] == "Milk"
    assert data["expirationDate"] == "2026-02-01"


def test_update_item_category_and_clear_date(client, categories):
    item = create_item(client, categories["Dairy"].id, expirationDate="2026-02-01")

    response = client.put(
        f"/api/v1/items/{item['id']}",
        json={"categoryId": categories["Grains"].id, "expirationDate": None},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["categoryId"] == categories["Grains"].id
    assert data["category"]["name"] == "Grains"
    assert data["expirationDate"] is None


def test_update_item_unknown_category(client, categories):
    item = create_item(client, categories["Dairy"].id)

    response = client.put(f"/api/v1/items/{item['id']}", json={"categoryId": "nope"})
    assert response.status_code == 400


def test_delete_item(client, categories):
    item = create_item(client, categories["Dairy"].id)

    response = client.delete(f"/api/v1/items/{item['id']}")
    assert response.status_code == 204

    items = client.get("/api/v1/items").json()
    assert not any(i["id"] == item["id"] for i in items)


# --- Expiring soon ---


def test_expiring_items(client, categories):
    today = date.today()
    category_id = categories["Fruits"].id
    create_item(client, category_id, name="Far", expirationDate=(today + timedelta(days=30)).isoformat())
    create_item(client, category_id, name="Soon", expirationDate=(today + timedelta(days=3)).isoformat())
    create_item(client, category_id, name="Expired", expirationDate=(today - timedelta(days=2)).isoformat())
    create_item(client, category_id, name="Edge", expirationDate=(today + timedelta(days=7)).isoformat())
    create_item(client, category_id, name="Undated")

    response = client.get("/api/v1/items/expiring")
    assert response.status_code == 200
    assert [i["name"] for i in response.json()] == ["Expired", "Soon", "Edge"]


def test_expiring_items_custom_window(client, categories):
    today = date.today()
    category_id = categories["Fruits"].id
    create_item(client, category_id, name="Today", expirationDate=today.isoformat())
    create_item(client, category_id, name="Later", expirationDate=(today + timedelta(days=5)).isoformat())

    response = client.get("/api/v1/items/expiring", params={"days": 0})
    assert [i["name"] for i in response.json()] == ["Today"]

    response = client.get("/api/v1/items/expiring", params={"days": -1})
    assert response.status_code == 422
