"""Core domain entities."""

from src.core.entities.catalog import Customer, Item
from src.core.entities.invoice import (
    BankDetails,
    Invoice,
    InvoiceCustomer,
    InvoiceDraft,
    InvoiceFilter,
    InvoiceLine,
    Seller,
    coerce_date,
)
from src.core.entities.meta import INVOICE_COUNTER_KEY

__all__ = [
    # Master data
    "Item",
    "Customer",
    # Invoice
    "BankDetails",
    "Invoice",
    "InvoiceCustomer",
    "InvoiceDraft",
    "InvoiceFilter",
    "InvoiceLine",
    "Seller",
    "coerce_date",
    # Meta
    "INVOICE_COUNTER_KEY",
]
