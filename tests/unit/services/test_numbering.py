"""Unit tests for invoice numbering."""

import asyncio
from datetime import date
from unittest.mock import AsyncMock

import pytest

from src.core.entities import INVOICE_COUNTER_KEY
from src.core.services.numbering import (
    InvoiceNumberingService,
    next_invoice_number,
    parse_counter,
)


class TestNextInvoiceNumber:
    def test_format(self):
        assert next_invoice_number(date(2025, 12, 13), 1) == "YG-20251213-0001"

    def test_counter_wider_than_padding(self):
        assert next_invoice_number(date(2025, 12, 13), 12345) == "YG-20251213-12345"

    def test_custom_prefix_and_width(self):
        assert next_invoice_number(date(2026, 1, 2), 7, prefix="AB", width=6) == "AB-20260102-000007"

    def test_missing_date_uses_today(self):
        number = next_invoice_number(None, 3)
        assert number == f"YG-{date.today():%Y%m%d}-0003"


class TestParseCounter:
    @pytest.mark.parametrize(
        "number,expected",
        [
            ("YG-20251213-0004", 4),
            ("YG-20251213-10000", 10000),
            ("IMP-1734000000000", None),
            ("XX-20251213-0004", None),
            ("YG-2025121-0004", None),
        ],
    )
    def test_parse(self, number, expected):
        assert parse_counter(number, "YG") == expected


@pytest.fixture
def meta_store():
    store = AsyncMock()
    store.get_value.return_value = None
    return store


@pytest.fixture
def invoice_store():
    store = AsyncMock()
    store.list_numbers.return_value = []
    return store


@pytest.fixture
def service(meta_store, invoice_store):
    return InvoiceNumberingService(meta_store=meta_store, invoice_store=invoice_store)


class TestInvoiceNumberingService:
    async def test_current_defaults_to_start(self, service):
        assert await service.current() == 1

    async def test_current_reads_meta(self, service, meta_store):
        meta_store.get_value.return_value = 42
        assert await service.current() == 42

    async def test_ensure_counter_initializes_missing(self, service, meta_store):
        assert await service.ensure_counter() == 1
        meta_store.set_value.assert_awaited_once_with(INVOICE_COUNTER_KEY, 1)

    async def test_ensure_counter_keeps_existing(self, service, meta_store):
        meta_store.get_value.return_value = 9
        assert await service.ensure_counter() == 9
        meta_store.set_value.assert_not_awaited()

    async def test_format_uses_settings(self, service):
        assert service.format(date(2025, 12, 13), 2) == "YG-20251213-0002"

    async def test_reconcile_raises_counter_past_max_suffix(
        self, service, meta_store, invoice_store
    ):
        meta_store.get_value.return_value = 3
        invoice_store.list_numbers.return_value = [
            "YG-20251201-0002",
            "YG-20251213-0010",
            "YG-20251210-bad",
        ]

        assert await service.reconcile() == 11
        meta_store.set_value.assert_awaited_with(INVOICE_COUNTER_KEY, 11)
        invoice_store.list_numbers.assert_awaited_once_with("YG-")

    async def test_reconcile_never_lowers(self, service, meta_store, invoice_store):
        meta_store.get_value.return_value = 50
        invoice_store.list_numbers.return_value = ["YG-20251213-0010"]

        assert await service.reconcile() == 50
        meta_store.set_value.assert_not_awaited()

    async def test_reconcile_empty_database(self, service, meta_store):
        assert await service.reconcile() == 1

    async def test_lock_is_shared(self, service):
        assert isinstance(service.lock, asyncio.Lock)
        async with service.lock:
            assert service.lock.locked()
