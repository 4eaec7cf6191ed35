"""Tests for catalog item and customer endpoints."""

import pytest


async def test_item_crud(async_client):
    response = await async_client.post(
        "/api/items", json={"name": " Cotton Shirt ", "sku": "SH-1", "price": 500}
    )
    assert response.status_code == 201
    item = response.json()
    assert item["name"] == "Cotton Shirt"

    response = await async_client.put(
        f"/api/items/{item['id']}", json={"name": "Cotton Shirt", "sku": "SH-1", "price": 550}
    )
    assert response.status_code == 200
    assert response.json()["price"] == 550

    response = await async_client.get(f"/api/items/{item['id']}")
    assert response.json()["sku"] == "SH-1"

    response = await async_client.delete(f"/api/items/{item['id']}")
    assert response.status_code == 204

    response = await async_client.get(f"/api/items/{item['id']}")
    assert response.status_code == 404
    assert response.json()["error_code"] == "ITEM_NOT_FOUND"


async def test_items_listed_by_name(async_client):
    for name in ["Kurta", "belt", "Jeans"]:
        await async_client.post("/api/items", json={"name": name})

    data = (await async_client.get("/api/items")).json()

    assert data["total"] == 3
    assert [i["name"] for i in data["items"]] == ["belt", "Jeans", "Kurta"]


@pytest.mark.parametrize(
    "payload",
    [{"name": ""}, {"name": "Belt", "price": -1}, {"sku": "X"}],
)
async def test_item_validation(async_client, payload):
    response = await async_client.post("/api/items", json=payload)
    assert response.status_code == 422
    assert response.json()["error_code"] == "VALIDATION_ERROR"


async def test_customer_crud(async_client):
    response = await async_client.post(
        "/api/customers", json={"name": "Ramesh Patil", "contact": "98765", "address": "Nashik"}
    )
    assert response.status_code == 201
    customer = response.json()

    response = await async_client.put(
        f"/api/customers/{customer['id']}", json={"name": "Ramesh Patil", "address": "Pune"}
    )
    assert response.json()["address"] == "Pune"
    assert response.json()["contact"] == ""

    data = (await async_client.get("/api/customers")).json()
    assert data["total"] == 1

    assert (await async_client.delete(f"/api/customers/{customer['id']}")).status_code == 204


async def test_missing_customer(async_client):
    response = await async_client.put("/api/customers/42", json={"name": "Ghost"})

    assert response.status_code == 404
    data = response.json()
    assert data["error_code"] == "CUSTOMER_NOT_FOUND"
    assert data["path"] == "/api/customers/42"
    assert data["hint"]
