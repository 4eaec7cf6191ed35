"""Unit tests for invoice list filtering."""

from datetime import date

import pytest

from src.core.entities import Invoice, InvoiceCustomer, InvoiceFilter
from src.core.services.invoice_filter import apply_invoice_filter


@pytest.fixture
def invoices() -> list[Invoice]:
    return [
        Invoice(
            invoice_number="YG-20251215-0003",
            date=date(2025, 12, 15),
            customer=InvoiceCustomer(name="Ramesh Patil"),
        ),
        Invoice(
            invoice_number="YG-20251210-0002",
            date=date(2025, 12, 10),
            customer=InvoiceCustomer(name="Suresh Kumar"),
        ),
        Invoice(
            invoice_number="IMP-1734000000000",
            date=date(2025, 11, 30),
            customer=InvoiceCustomer(name="ramesh traders"),
        ),
    ]


def test_no_filter_returns_all(invoices):
    assert apply_invoice_filter(invoices, None) == invoices
    assert apply_invoice_filter(invoices, InvoiceFilter()) == invoices


def test_customer_is_case_insensitive_substring(invoices):
    result = apply_invoice_filter(invoices, InvoiceFilter(customer_query="RAMESH"))
    assert [i.invoice_number for i in result] == ["YG-20251215-0003", "IMP-1734000000000"]


def test_invoice_number_substring(invoices):
    result = apply_invoice_filter(invoices, InvoiceFilter(invoice_number_query="1210"))
    assert [i.invoice_number for i in result] == ["YG-20251210-0002"]


def test_date_bounds_are_inclusive(invoices):
    result = apply_invoice_filter(
        invoices,
        InvoiceFilter(from_date=date(2025, 12, 10), to_date=date(2025, 12, 15)),
    )
    assert len(result) == 2


def test_filters_are_conjunctive(invoices):
    result = apply_invoice_filter(
        invoices,
        InvoiceFilter(customer_query="ramesh", to_date=date(2025, 12, 1)),
    )
    assert [i.invoice_number for i in result] == ["IMP-1734000000000"]


def test_preserves_order(invoices):
    result = apply_invoice_filter(invoices, InvoiceFilter(invoice_number_query="-"))
    assert result == invoices
