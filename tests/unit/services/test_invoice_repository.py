"""Unit tests for InvoiceRepository with mocked stores."""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from src.core.entities import Invoice, InvoiceCustomer, InvoiceDraft, InvoiceFilter, InvoiceLine, Seller
from src.core.exceptions import InvoiceNotFoundError
from src.core.services import InvoiceNumberingService, InvoiceRepository


@pytest.fixture
def store():
    store = AsyncMock()

    async def create_numbered(invoice, assign_number, counter_start=1):
        invoice.id = 10
        invoice.invoice_number = assign_number(7)
        return invoice

    store.create_numbered.side_effect = create_numbered
    store.update.return_value = True
    store.delete.return_value = True
    return store


@pytest.fixture
def repository(store, seller):
    numbering = InvoiceNumberingService(meta_store=AsyncMock(), invoice_store=store)
    return InvoiceRepository(
        invoice_store=store,
        numbering=numbering,
        seller=seller,
        default_payment_terms="Due on receipt",
        default_currency="INR",
    )


class TestCreate:
    async def test_assigns_number_from_draft_date(self, repository, sample_draft):
        invoice = await repository.create(sample_draft)
        assert invoice.id == 10
        assert invoice.invoice_number == "YG-20251213-0007"

    async def test_consolidates_lines(self, repository, sample_draft):
        invoice = await repository.create(sample_draft)
        assert [(l.description, l.qty, l.price) for l in invoice.lines] == [
            ("Cotton Shirt", 5, 500),
            ("Denim Jeans", 1, 1200),
        ]
        assert invoice.total == 3700

    async def test_snapshots_seller_and_defaults(self, repository, sample_draft, seller):
        invoice = await repository.create(sample_draft)
        assert invoice.seller == seller
        assert invoice.seller is not seller
        assert invoice.payment_terms == "Due on receipt"
        assert invoice.currency == "INR"

    async def test_ignores_client_number(self, repository, sample_draft):
        sample_draft.invoice_number = "HACKED-1"
        invoice = await repository.create(sample_draft)
        assert invoice.invoice_number == "YG-20251213-0007"

    async def test_counter_start_passed_to_store(self, repository, store, sample_draft):
        await repository.create(sample_draft)
        assert store.create_numbered.await_args.kwargs["counter_start"] == 1

    async def test_missing_date_defaults_to_today(self, repository):
        invoice = await repository.create(
            InvoiceDraft(lines=[InvoiceLine(description="Shirt", qty=1, price=1)])
        )
        assert invoice.date == date.today()
        assert invoice.invoice_number == f"YG-{date.today():%Y%m%d}-0007"


class TestUpdate:
    async def test_keeps_number_seller_and_created_at(self, repository, store, sample_invoice):
        store.get.return_value = sample_invoice
        draft = InvoiceDraft(
            invoice_number="YG-20990101-9999",
            date=date(2025, 12, 20),
            customer=InvoiceCustomer(name="New Name"),
            lines=[InvoiceLine(description="Kurta", qty=2, price=800)],
        )

        updated = await repository.update(1, draft)

        assert updated.id == 1
        assert updated.invoice_number == "YG-20251213-0001"
        assert updated.created_at == sample_invoice.created_at
        assert updated.seller == sample_invoice.seller
        assert updated.date == date(2025, 12, 20)
        assert updated.customer.name == "New Name"
        assert updated.total == 1600
        store.update.assert_awaited_once()
        store.create_numbered.assert_not_awaited()

    async def test_keeps_old_seller_after_settings_change(self, store, sample_invoice):
        store.get.return_value = sample_invoice
        repository = InvoiceRepository(
            invoice_store=store,
            numbering=InvoiceNumberingService(AsyncMock(), store),
            seller=Seller(owner="Someone Else"),
        )
        updated = await repository.update(1, InvoiceDraft())
        assert updated.seller.owner == sample_invoice.seller.owner

    async def test_missing_raises_not_found(self, repository, store):
        store.get.return_value = None
        with pytest.raises(InvoiceNotFoundError):
            await repository.update(99, InvoiceDraft())

    async def test_store_reports_no_row(self, repository, store, sample_invoice):
        store.get.return_value = sample_invoice
        store.update.return_value = False
        with pytest.raises(InvoiceNotFoundError):
            await repository.update(1, InvoiceDraft())


class TestDeleteAndGet:
    async def test_delete(self, repository, store):
        await repository.delete(3)
        store.delete.assert_awaited_once_with(3)

    async def test_delete_missing(self, repository, store):
        store.delete.return_value = False
        with pytest.raises(InvoiceNotFoundError):
            await repository.delete(3)

    async def test_get_missing(self, repository, store):
        store.get.return_value = None
        with pytest.raises(InvoiceNotFoundError):
            await repository.get(5)

    async def test_get(self, repository, store, sample_invoice):
        store.get.return_value = sample_invoice
        assert await repository.get(1) is sample_invoice


class TestList:
    async def test_applies_filter(self, repository, store):
        store.list_all.return_value = [
            Invoice(invoice_number="A-1", customer=InvoiceCustomer(name="Ramesh")),
            Invoice(invoice_number="A-2", customer=InvoiceCustomer(name="Suresh")),
        ]
        result = await repository.list(InvoiceFilter(customer_query="sure"))
        assert [i.invoice_number for i in result] == ["A-2"]

    async def test_without_filter(self, repository, store):
        store.list_all.return_value = []
        assert await repository.list() == []
