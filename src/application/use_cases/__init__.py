"""
Application use cases.

Each use case coordinates core services and infrastructure for one
user-facing operation.
"""

from src.application.use_cases.export_invoices import ExportInvoicesUseCase
from src.application.use_cases.import_invoices import ImportInvoicesUseCase, ImportResult
from src.application.use_cases.render_invoice import RenderedDocument, RenderInvoiceUseCase

__all__ = [
    "ExportInvoicesUseCase",
    "ImportInvoicesUseCase",
    "ImportResult",
    "RenderInvoiceUseCase",
    "RenderedDocument",
]
