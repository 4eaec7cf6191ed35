"""Tests for bulk export and import endpoints."""

import json

import pytest

from src.config import get_settings

INVOICE = {
    "date": "2025-12-13",
    "customer": {"name": "Ramesh Patil"},
    "lines": [
        {"description": "Cotton Shirt", "qty": 5, "price": 500},
        {"description": "Denim Jeans", "qty": 1, "price": 1200},
    ],
}


@pytest.fixture
async def created(async_client) -> dict:
    return (await async_client.post("/api/invoices", json=INVOICE)).json()


async def test_export_json(async_client, created):
    response = await async_client.get("/api/transfer/export/json")

    assert response.status_code == 200
    assert "invoices_export_" in response.headers["content-disposition"]
    data = response.json()
    assert data["exportInfo"]["totalInvoices"] == 1
    assert data["invoices"][0]["invoiceNumber"] == "YG-20251213-0001"


async def test_export_csv_with_range(async_client, created):
    response = await async_client.get(
        "/api/transfer/export/csv", params={"from": "2025-12-01", "to": "2025-12-31"}
    )

    assert response.status_code == 200
    assert 'filename="invoices_2025-12-01_to_2025-12-31.csv"' in response.headers[
        "content-disposition"
    ]
    assert "Date Range: 2025-12-01 to 2025-12-31" in response.text
    assert "YG-20251213-0001" in response.text


async def test_export_csv_range_excludes(async_client, created):
    response = await async_client.get("/api/transfer/export/csv", params={"from": "2026-01-01"})
    assert "Total Invoices: 0" in response.text


async def test_export_pdf(async_client, created):
    response = await async_client.get("/api/transfer/export/pdf")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.content.startswith(b"%PDF")


async def test_import_json_round_trip(async_client, created):
    exported = (await async_client.get("/api/transfer/export/json")).content

    response = await async_client.post("/api/transfer/import/json", content=exported)

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["imported"] == 1
    assert data["message"] == "Successfully imported 1 invoices"
    assert data["invoice_numbers"][0].startswith("IMP-")

    listing = (await async_client.get("/api/invoices")).json()
    assert listing["total"] == 2


async def test_import_does_not_consume_counter(async_client):
    payload = json.dumps([{**INVOICE, "invoiceNumber": "OLD-7"}])
    await async_client.post("/api/transfer/import/json", content=payload)

    created = (await async_client.post("/api/invoices", json=INVOICE)).json()
    assert created["invoice_number"] == "YG-20251213-0001"


async def test_import_csv(async_client, created):
    exported = (await async_client.get(f"/api/invoices/{created['id']}/csv")).content

    response = await async_client.post("/api/transfer/import/csv", content=exported)

    data = response.json()
    assert response.status_code == 200
    assert data["message"] == "Successfully imported 1 invoices from CSV"
    assert data["invoice_numbers"][0].startswith("IMP-")


async def test_import_invalid_json(async_client):
    response = await async_client.post("/api/transfer/import/json", content=b'{"foo": 1}')

    assert response.status_code == 400
    data = response.json()
    assert data["success"] is False
    assert data["message"] == "Import failed: Invalid JSON format"


async def test_import_bad_csv_version(async_client):
    response = await async_client.post(
        "/api/transfer/import/csv", content=b"#format,invoice-csv,3\n"
    )
    assert response.status_code == 400
    assert "version '3'" in response.json()["message"]


async def test_import_empty_body(async_client):
    response = await async_client.post("/api/transfer/import/json", content=b"  ")
    assert response.status_code == 400
    assert response.json()["message"] == "Empty file"


async def test_import_too_large(async_client):
    get_settings().api.max_upload_size = 10

    response = await async_client.post("/api/transfer/import/json", content=b"[" + b" " * 20 + b"]")

    assert response.status_code == 413
    assert response.json()["error_code"] == "PAYLOAD_TOO_LARGE"
