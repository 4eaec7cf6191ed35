"""Tests for invoice endpoints."""

import pytest

INVOICE = {
    "date": "2025-12-13",
    "customer": {"name": "Ramesh Patil", "contact": "98765 43210", "address": "Nashik"},
    "lines": [
        {"item_id": 1, "description": "Cotton Shirt", "qty": 2, "price": 500},
        {"item_id": 2, "description": "Denim Jeans", "qty": 1, "price": 1200},
        {"item_id": 1, "description": "cotton shirt ", "qty": 3, "price": 450},
    ],
    "show_pan_no": True,
}


@pytest.fixture
async def created(async_client) -> dict:
    response = await async_client.post("/api/invoices", json=INVOICE)
    assert response.status_code == 201
    return response.json()


async def test_create_assigns_number_and_consolidates(created):
    assert created["invoice_number"] == "YG-20251213-0001"
    assert created["total"] == 3700
    assert created["total_qty"] == 6
    assert [(l["description"], l["qty"], l["price"]) for l in created["lines"]] == [
        ("Cotton Shirt", 5, 500),
        ("Denim Jeans", 1, 1200),
    ]
    assert created["seller"]["owner"] == "Yashwant Gupta"
    assert created["payment_terms"] == "Due on receipt"
    assert created["currency"] == "INR"


async def test_numbers_are_sequential(async_client, created):
    second = (await async_client.post("/api/invoices", json={**INVOICE, "date": "2025-12-14"})).json()
    assert second["invoice_number"] == "YG-20251214-0002"


async def test_supplied_number_is_ignored(async_client):
    response = await async_client.post(
        "/api/invoices", json={**INVOICE, "invoice_number": "CUSTOM-1"}
    )
    assert response.json()["invoice_number"] == "YG-20251213-0001"


async def test_get_and_list(async_client, created):
    response = await async_client.get(f"/api/invoices/{created['id']}")
    assert response.status_code == 200
    assert response.json()["invoice_number"] == created["invoice_number"]

    data = (await async_client.get("/api/invoices")).json()
    assert data["total"] == 1


async def test_list_filters(async_client, created):
    await async_client.post(
        "/api/invoices",
        json={**INVOICE, "date": "2026-01-05", "customer": {"name": "Suresh Kumar"}},
    )

    by_customer = (await async_client.get("/api/invoices", params={"customer": "suresh"})).json()
    assert [i["customer"]["name"] for i in by_customer["invoices"]] == ["Suresh Kumar"]

    by_range = (
        await async_client.get("/api/invoices", params={"from": "2025-12-01", "to": "2025-12-31"})
    ).json()
    assert [i["invoice_number"] for i in by_range["invoices"]] == ["YG-20251213-0001"]

    by_number = (await async_client.get("/api/invoices", params={"invoice_number": "0002"})).json()
    assert by_number["total"] == 1


async def test_update_keeps_number(async_client, created):
    response = await async_client.put(
        f"/api/invoices/{created['id']}",
        json={
            "invoice_number": "OTHER",
            "date": "2025-12-20",
            "customer": {"name": "Ramesh Patil"},
            "lines": [{"description": "Kurta", "qty": 1, "price": 900}],
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["invoice_number"] == "YG-20251213-0001"
    assert data["date"] == "2025-12-20"
    assert data["total"] == 900

    next_invoice = (await async_client.post("/api/invoices", json=INVOICE)).json()
    assert next_invoice["invoice_number"] == "YG-20251213-0002"


async def test_delete_does_not_reuse_number(async_client, created):
    assert (await async_client.delete(f"/api/invoices/{created['id']}")).status_code == 204

    next_invoice = (await async_client.post("/api/invoices", json=INVOICE)).json()
    assert next_invoice["invoice_number"] == "YG-20251213-0002"


@pytest.mark.parametrize(
    "method,path",
    [
        ("GET", "/api/invoices/999"),
        ("PUT", "/api/invoices/999"),
        ("DELETE", "/api/invoices/999"),
        ("GET", "/api/invoices/999/pdf"),
        ("GET", "/api/invoices/999/print"),
        ("GET", "/api/invoices/999/csv"),
    ],
)
async def test_missing_invoice(async_client, method, path):
    kwargs = {"json": INVOICE} if method == "PUT" else {}
    response = await async_client.request(method, path, **kwargs)

    assert response.status_code == 404
    assert response.json()["error_code"] == "INVOICE_NOT_FOUND"


async def test_invalid_line(async_client):
    response = await async_client.post(
        "/api/invoices", json={**INVOICE, "lines": [{"description": "X", "qty": -1}]}
    )
    assert response.status_code == 422


async def test_pdf_download(async_client, created):
    response = await async_client.get(f"/api/invoices/{created['id']}/pdf")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert 'filename="YG-20251213-0001.pdf"' in response.headers["content-disposition"]
    assert response.content.startswith(b"%PDF")


async def test_print_page(async_client, created):
    response = await async_client.get(f"/api/invoices/{created['id']}/print")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "window.print()" in response.text
    assert "Pan No:" in response.text


async def test_csv_download(async_client, created):
    response = await async_client.get(f"/api/invoices/{created['id']}/csv")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert response.text.startswith("#format,invoice-csv,1")
