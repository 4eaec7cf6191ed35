"""Unit tests for ImportInvoicesUseCase."""

import json
import re
from unittest.mock import AsyncMock

import pytest

from src.application.use_cases.import_invoices import ImportInvoicesUseCase, placeholder_number
from src.core.exceptions import DuplicateInvoiceNumberError
from src.infrastructure.transfer import csv_codec, json_codec


@pytest.fixture
def store():
    store = AsyncMock()
    store.number_exists.return_value = False
    store.insert.side_effect = lambda invoice: invoice
    return store


@pytest.fixture
def numbering():
    return AsyncMock()


@pytest.fixture
def use_case(store, seller, numbering):
    return ImportInvoicesUseCase(invoice_store=store, seller=seller, numbering=numbering)


class TestPlaceholderNumber:
    def test_plain(self):
        assert re.fullmatch(r"IMP-\d{13}", placeholder_number())

    def test_with_suffix(self):
        assert re.fullmatch(r"IMP-\d{13}-[a-z0-9]{6}", placeholder_number(with_suffix=True))


class TestJsonImport:
    async def test_keeps_given_numbers(self, use_case, store, sample_invoice):
        payload = json_codec.dumps_export([sample_invoice])

        result = await use_case.execute(payload, "json")

        assert result.success
        assert result.imported == 1
        assert result.message == "Successfully imported 1 invoices"
        assert result.invoice_numbers == ["YG-20251213-0001"]
        store.insert.assert_awaited_once()
        store.create_numbered.assert_not_called()

    async def test_reconciles_counter_after_insert(
        self, use_case, store, numbering, sample_invoice
    ):
        order = []
        store.insert.side_effect = lambda invoice: order.append("insert")
        numbering.reconcile.side_effect = lambda: order.append("reconcile")

        await use_case.execute(json_codec.dumps_export([sample_invoice]), "json")

        assert order == ["insert", "reconcile"]

    async def test_missing_number_gets_placeholder(self, use_case):
        result = await use_case.execute(json.dumps([{"customer": {"name": "A"}}]), "json")
        assert re.fullmatch(r"IMP-\d+", result.invoice_numbers[0])

    async def test_collision_gets_suffixed_placeholder(self, use_case, store, sample_invoice):
        store.number_exists.return_value = True

        result = await use_case.execute(json_codec.dumps_export([sample_invoice]), "json")

        assert result.success
        assert re.fullmatch(r"IMP-\d+-[a-z0-9]{6}", result.invoice_numbers[0])

    async def test_retries_duplicate_insert(self, use_case, store, sample_invoice):
        calls = []

        async def insert(invoice):
            calls.append(invoice.invoice_number)
            if len(calls) == 1:
                raise DuplicateInvoiceNumberError(invoice.invoice_number)
            return invoice

        store.insert.side_effect = insert

        result = await use_case.execute(json_codec.dumps_export([sample_invoice]), "json")

        assert result.success
        assert calls[0] == "YG-20251213-0001"
        assert calls[1].startswith("IMP-")

    async def test_accepts_bytes_with_bom(self, use_case, sample_invoice):
        payload = b"\xef\xbb\xbf" + json_codec.dumps_export([sample_invoice]).encode("utf-8")
        result = await use_case.execute(payload, "json")
        assert result.imported == 1

    async def test_invalid_payload_is_reported(self, use_case, store, numbering):
        result = await use_case.execute('{"data": 1}', "json")

        assert not result.success
        assert result.imported == 0
        assert result.message == "Import failed: Invalid JSON format"
        store.insert.assert_not_called()
        numbering.reconcile.assert_not_called()

    async def test_partial_import_is_kept(self, use_case, store, numbering, sample_invoice):
        second = sample_invoice.model_copy(deep=True)
        second.invoice_number = "YG-20251213-0002"

        async def insert(invoice):
            if store.insert.await_count > 1:
                raise DuplicateInvoiceNumberError(invoice.invoice_number)
            return invoice

        store.insert.side_effect = insert

        result = await use_case.execute(json_codec.dumps_export([sample_invoice, second]), "json")

        assert not result.success
        assert result.imported == 1
        assert result.invoice_numbers == ["YG-20251213-0001"]
        assert result.message.startswith("Import failed: Invoice number already exists")
        assert store.insert.await_count == 4
        numbering.reconcile.assert_awaited_once()


class TestCsvImport:
    async def test_always_uses_placeholders(self, use_case, sample_invoice):
        result = await use_case.execute(csv_codec.export_invoice(sample_invoice), "csv")

        assert result.success
        assert result.message == "Successfully imported 1 invoices from CSV"
        assert re.fullmatch(r"IMP-\d+-[a-z0-9]{6}", result.invoice_numbers[0])

    async def test_format_error_message(self, use_case):
        result = await use_case.execute("#format,invoice-csv,2\n", "csv")

        assert not result.success
        assert result.message == "CSV import failed: Unsupported CSV format version '2' (line 1)"

    def test_to_response(self):
        from src.application.use_cases.import_invoices import ImportResult

        response = ImportInvoicesUseCase.to_response(
            ImportResult(success=True, imported=2, message="ok", invoice_numbers=["a", "b"])
        )
        assert response.imported == 2
        assert response.invoice_numbers == ["a", "b"]
