"""Tests for the dashboard endpoint."""

from datetime import date


async def test_empty_dashboard(async_client):
    data = (await async_client.get("/api/dashboard")).json()

    assert data["total_invoices"] == 0
    assert data["total_revenue"] == 0
    assert data["months"] == []
    assert data["next_invoice_number"] == f"YG-{date.today():%Y%m%d}-0001"


async def test_dashboard_totals(async_client):
    for day, price in [("2025-11-02", 100), ("2025-12-13", 250), ("2025-12-20", 50)]:
        await async_client.post(
            "/api/invoices",
            json={"date": day, "lines": [{"description": "Belt", "qty": 2, "price": price}]},
        )

    data = (await async_client.get("/api/dashboard")).json()

    assert data["total_invoices"] == 3
    assert data["total_revenue"] == 800
    assert data["months"] == [
        {"month": "2025-12", "invoice_count": 2, "revenue": 600},
        {"month": "2025-11", "invoice_count": 1, "revenue": 200},
    ]
    assert data["next_invoice_number"].endswith("-0004")
