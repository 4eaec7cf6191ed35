"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Iterator
from datetime import date
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.core.entities import (
    BankDetails,
    Invoice,
    InvoiceCustomer,
    InvoiceDraft,
    InvoiceLine,
    Seller,
)


@pytest.fixture
def seller() -> Seller:
    """Seller identity used on test invoices."""
    return Seller(
        business_name="Yash Garments",
        owner="Yashwant Gupta",
        address="12 Market Road, Pune",
        contact="+91 98220 00000",
        pan_no="ABCDE1234F",
        bank=BankDetails(
            name="State Bank of India",
            account_name="Yash Garments",
            account_no="00112233445",
            ifsc="SBIN0000123",
            upi="yash@sbi",
        ),
    )


@pytest.fixture
def sample_draft() -> InvoiceDraft:
    """Draft with a repeated item that consolidates to two lines."""
    return InvoiceDraft(
        date=date(2025, 12, 13),
        customer=InvoiceCustomer(name="Ramesh Patil", contact="98765 43210", address="Nashik"),
        lines=[
            InvoiceLine(item_id=1, description="Cotton Shirt", qty=2, price=500),
            InvoiceLine(item_id=2, description="Denim Jeans", qty=1, price=1200),
            InvoiceLine(item_id=1, description="cotton shirt ", qty=3, price=450),
        ],
    )


@pytest.fixture
def sample_invoice(seller: Seller) -> Invoice:
    """Saved-looking invoice with two lines totalling 3700."""
    return Invoice(
        id=1,
        invoice_number="YG-20251213-0001",
        date=date(2025, 12, 13),
        customer=InvoiceCustomer(name="Ramesh Patil", contact="98765 43210", address="Nashik"),
        seller=seller,
        lines=[
            InvoiceLine(item_id=1, description="Cotton Shirt", qty=5, price=500),
            InvoiceLine(item_id=2, description="Denim Jeans", qty=1, price=1200),
        ],
        show_pan_no=True,
    )


@pytest.fixture
def app_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """
    Point settings at a fresh data directory and reset every singleton.

    Yields the database path the application will use.
    """
    import src.infrastructure.storage.sqlite.connection as conn_module
    from src.api.dependencies import get_app_settings
    from src.application.services import reset_services
    from src.config import reset_settings

    monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("SELLER_OWNER", "Yashwant Gupta")
    monkeypatch.setenv("SELLER_BUSINESS_NAME", "Yash Garments")
    monkeypatch.setenv("SELLER_PAN_NO", "ABCDE1234F")
    reset_settings()
    reset_services()
    get_app_settings.cache_clear()
    conn_module._pool = None

    from src.config import get_settings

    yield get_settings().storage.db_path

    reset_settings()
    reset_services()
    get_app_settings.cache_clear()
    conn_module._pool = None


@pytest_asyncio.fixture
async def async_client(app_env: Path) -> AsyncGenerator[AsyncClient, None]:
    """
    Async client against a migrated temporary database.

    The lifespan is driven by hand because ASGITransport does not send
    lifespan events.
    """
    from src.api.main import create_app, lifespan

    app = create_app()
    async with lifespan(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
