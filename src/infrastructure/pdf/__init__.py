"""Printed document rendering: PDF via fpdf2 and print-ready HTML."""

from src.infrastructure.pdf.invoice_pdf_renderer import Fpdf2InvoiceRenderer, IInvoicePdfRenderer
from src.infrastructure.pdf.print_renderer import HtmlPrintRenderer

__all__ = [
    "Fpdf2InvoiceRenderer",
    "IInvoicePdfRenderer",
    "HtmlPrintRenderer",
]
