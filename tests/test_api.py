"""API endpoint tests."""

import pytest


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_create_category(client):
    """Test creating a category."""
    response = client.post("/api/v1/category", json={"name": "Books"})
    assert response.status_code == 201
    data = response.json()
    assert data["id"] == 0
    assert data["name"] == "Books"
    assert data["createdAt"] == data["modifiedAt"]


@pytest.mark.parametrize("body", [{}, {"name": ""}, {"name": None}])
def test_create_category_without_name(client, body):
    response = client.post("/api/v1/category", json=body)
    assert response.status_code == 400
    assert "name" in response.json()["detail"]


def test_create_category_with_wrong_body_type(client):
    response = client.post("/api/v1/category", json={"name": 5})
    assert response.status_code == 400


def test_get_category(client):
    client.post("/api/v1/category", json={"name": "Books"})

    response = client.get("/api/v1/category/0")
    assert response.status_code == 200
    assert response.json()["name"] == "Books"

    assert client.get("/api/v1/category/99").status_code == 404
    assert client.get("/api/v1/category/-1").status_code == 400
    assert client.get("/api/v1/category/abc").status_code == 400


def test_update_category(client):
    """Test patching a category name."""
    created = client.post("/api/v1/category", json={"name": "Old"}).json()

    response = client.patch("/api/v1/category/0", json={"name": "New"})
    assert response.status_code == 200
    assert response.json()["name"] == "New"
    assert response.json()["modifiedAt"] > created["modifiedAt"]


def test_update_category_without_fields_is_not_modified(client):
    client.post("/api/v1/category", json={"name": "Books"})

    response = client.patch("/api/v1/category/0", json={})
    assert response.status_code == 304
    assert response.content == b""


def test_update_missing_category(client):
    response = client.patch("/api/v1/category/7", json={"name": "New"})
    assert response.status_code == 404


def test_delete_category(client):
    client.post("/api/v1/category", json={"name": "Temp"})

    response = client.delete("/api/v1/category/0")
    assert response.status_code == 204
    assert client.delete("/api/v1/category/0").status_code == 404
    assert client.get("/api/v1/category").json() == []


def test_list_categories_pagination(client):
    """Test limit and skip are applied in insertion order."""
    for name in ["a", "b", "c", "d"]:
        client.post("/api/v1/category", json={"name": name})

    response = client.get("/api/v1/category", params={"skip": 1, "limit": 2})
    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["b", "c"]


@pytest.mark.parametrize(
    "params",
    [{"limit": 0}, {"limit": 1001}, {"limit": "x"}, {"skip": -1}, {"name": ""}, {"name": "("}],
)
def test_list_categories_rejects_bad_query(client, params):
    response = client.get("/api/v1/category", params=params)
    assert response.status_code == 400


def test_list_categories_name_filter(client):
    """Test the name filter is case-insensitive and applied before pagination."""
    for name in ["Fruit", "Tools", "fruit snacks", "Dried FRUIT"]:
        client.post("/api/v1/category", json={"name": name})

    response = client.get("/api/v1/category", params={"name": "fruit"})
    assert [c["name"] for c in response.json()] == ["Fruit", "fruit snacks", "Dried FRUIT"]

    response = client.get("/api/v1/category", params={"name": "^fruit", "skip": 1})
    assert [c["name"] for c in response.json()] == ["fruit snacks"]


def test_create_item(client):
    """Test creating an item with a category."""
    client.post("/api/v1/category", json={"name": "Produce"})

    response = client.post("/api/v1/item", json={"name": "Apple", "categoryIds": [0]})
    assert response.status_code == 201
    assert response.json()["categoryIds"] == [0]


def test_create_item_with_missing_category(client):
    response = client.post("/api/v1/item", json={"name": "Fork", "categoryIds": [1234]})
    assert response.status_code == 400
    assert "1234" in response.json()["detail"]
    assert client.get("/api/v1/item").json() == []


def test_update_and_delete_item(client):
    client.post("/api/v1/item", json={"name": "Apple"})

    response = client.patch("/api/v1/item/0", json={"name": "Pear"})
    assert response.status_code == 200
    assert response.json()["name"] == "Pear"

    assert client.patch("/api/v1/item/0", json={}).status_code == 304
    assert client.delete("/api/v1/item/0").status_code == 204
    assert client.get("/api/v1/item/0").status_code == 404


def test_create_list_with_refs(client):
    """Test creating a list referencing an item and another list."""
    client.post("/api/v1/item", json={"name": "Apple"})
    client.post("/api/v1/list", json={"name": "Snacks"})

    response = client.post(
        "/api/v1/list",
        json={
            "name": "Picnic",
            "itemRefs": [{"itemId": 0, "count": 3}],
            "listRefs": [{"listId": 0, "count": 1}],
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert data["itemRefs"][0]["itemId"] == 0
    assert data["itemRefs"][0]["count"] == 3
    assert data["listRefs"][0]["listId"] == 0
    assert "createdAt" in data["listRefs"][0]


def test_create_list_with_bad_count(client):
    client.post("/api/v1/item", json={"name": "Apple"})
    response = client.post(
        "/api/v1/list", json={"name": "Picnic", "itemRefs": [{"itemId": 0, "count": 0}]}
    )
    assert response.status_code == 400


def test_rename_item_after_category_delete(client):
    """Test renaming an item whose category was deleted succeeds."""
    client.post("/api/v1/category", json={"name": "Produce"})
    client.post("/api/v1/item", json={"name": "Apple", "categoryIds": [0]})
    client.delete("/api/v1/category/0")

    response = client.patch("/api/v1/item/0", json={"name": "Pear"})
    assert response.status_code == 200
    assert response.json()["name"] == "Pear"
    assert response.json()["categoryIds"] == [0]


def test_rename_list_after_item_delete(client):
    client.post("/api/v1/item", json={"name": "Apple"})
    client.post("/api/v1/list", json={"name": "Picnic", "itemRefs": [{"itemId": 0, "count": 1}]})
    client.delete("/api/v1/item/0")

    response = client.patch("/api/v1/list/0", json={"name": "Lunch"})
    assert response.status_code == 200
    assert response.json()["itemRefs"][0]["itemId"] == 0

    response = client.patch("/api/v1/list/0", json={"itemRefs": [{"itemId": 0, "count": 2}]})
    assert response.status_code == 400


def test_update_list_to_reference_itself(client):
    client.post("/api/v1/list", json={"name": "Self"})

    response = client.patch("/api/v1/list/0", json={"listRefs": [{"listId": 0, "count": 1}]})
    assert response.status_code == 400
    assert "circular" in response.json()["detail"]
    assert client.get("/api/v1/list/0").json()["listRefs"] == []


def test_list_lists_and_delete(client):
    client.post("/api/v1/list", json={"name": "Groceries"})
    client.post("/api/v1/list", json={"name": "Camping"})

    response = client.get("/api/v1/list", params={"name": "camp"})
    assert [entry["name"] for entry in response.json()] == ["Camping"]

    assert client.delete("/api/v1/list/1").status_code == 204
    assert client.delete("/api/v1/list/1").status_code == 404


def test_persistence_failure_is_server_error(client, store, tmp_path):
    """Test a failed write surfaces as 503 instead of a silent success."""
    store.filepath = tmp_path / "missing" / "db.json"

    response = client.post("/api/v1/category", json={"name": "Books"})
    assert response.status_code == 503
