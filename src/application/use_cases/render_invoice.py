"""
Render Invoice Use Case.

Produces the printable documents for one saved invoice: PDF, print HTML
and single-invoice CSV.
"""

from dataclasses import dataclass

from src.config import get_logger, get_settings
from src.core.services import InvoiceRepository
from src.infrastructure.pdf import Fpdf2InvoiceRenderer, HtmlPrintRenderer, IInvoicePdfRenderer
from src.infrastructure.transfer import csv_codec

logger = get_logger(__name__)


@dataclass
class RenderedDocument:
    """A rendered document ready to be sent or written to disk."""

    content: bytes
    filename: str
    media_type: str

    @property
    def size(self) -> int:
        return len(self.content)


class RenderInvoiceUseCase:
    """
    Use case for rendering a saved invoice.

    Flow:
    1. Load the invoice through the repository (NotFound if missing)
    2. Render with the requested renderer
    3. Return bytes with a filename based on the invoice number
    """

    def __init__(
        self,
        repository: InvoiceRepository | None = None,
        pdf_renderer: IInvoicePdfRenderer | None = None,
        html_renderer: HtmlPrintRenderer | None = None,
    ):
        self._repository = repository
        self._pdf_renderer = pdf_renderer
        self._html_renderer = html_renderer

    async def _get_repository(self) -> InvoiceRepository:
        if self._repository is None:
            from src.application.services import get_invoice_repository

            self._repository = await get_invoice_repository()
        return self._repository

    async def pdf(self, invoice_id: int) -> RenderedDocument:
        invoice = await (await self._get_repository()).get(invoice_id)
        renderer = self._pdf_renderer or Fpdf2InvoiceRenderer()
        content = renderer.render(invoice)
        logger.info(
            "invoice_pdf_generated",
            invoice_id=invoice_id,
            invoice_number=invoice.invoice_number,
            file_size=len(content),
        )
        return RenderedDocument(
            content=content,
            filename=f"{invoice.invoice_number or 'invoice'}.pdf",
            media_type="application/pdf",
        )

    async def html(self, invoice_id: int) -> RenderedDocument:
        invoice = await (await self._get_repository()).get(invoice_id)
        renderer = self._html_renderer or HtmlPrintRenderer()
        return RenderedDocument(
            content=renderer.render(invoice).encode("utf-8"),
            filename=f"{invoice.invoice_number or 'invoice'}.html",
            media_type="text/html; charset=utf-8",
        )

    async def csv(self, invoice_id: int) -> RenderedDocument:
        invoice = await (await self._get_repository()).get(invoice_id)
        text = csv_codec.export_invoice(
            invoice, empty_rows=get_settings().invoice.empty_table_rows
        )
        return RenderedDocument(
            content=text.encode("utf-8"),
            filename=f"{invoice.invoice_number or 'invoice'}.csv",
            media_type="text/csv; charset=utf-8",
        )
