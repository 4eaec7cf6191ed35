"""
Core business logic services.

Layer-pure services that depend only on:
- src/core/entities/*
- src/core/interfaces/*
- src/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from src.core.services.amount_words import format_long_date, number_to_words
from src.core.services.consolidation import consolidate_lines, line_key
from src.core.services.dashboard import DashboardSummary, MonthSummary, summarize
from src.core.services.invoice_filter import apply_invoice_filter
from src.core.services.invoice_repository import InvoiceRepository
from src.core.services.master_data import MasterDataService
from src.core.services.numbering import (
    InvoiceNumberingService,
    next_invoice_number,
    parse_counter,
)

__all__ = [
    # Numbering
    "InvoiceNumberingService",
    "next_invoice_number",
    "parse_counter",
    # Consolidation
    "consolidate_lines",
    "line_key",
    # Repository
    "InvoiceRepository",
    "apply_invoice_filter",
    # Master data
    "MasterDataService",
    # Dashboard
    "DashboardSummary",
    "MonthSummary",
    "summarize",
    # Printing helpers
    "number_to_words",
    "format_long_date",
]
