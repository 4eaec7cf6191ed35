"""
Export Invoices Use Case.

Bulk exports: JSON backup of every invoice, and the summary report as
CSV or PDF over an optional inclusive date range.
"""

from datetime import date

from src.application.use_cases.render_invoice import RenderedDocument
from src.config import get_logger
from src.core.entities import Invoice, InvoiceFilter
from src.core.services import InvoiceRepository
from src.infrastructure.pdf import Fpdf2InvoiceRenderer, IInvoicePdfRenderer
from src.infrastructure.transfer import csv_codec, json_codec

logger = get_logger(__name__)


def report_filename(
    stem: str, extension: str, from_date: date | None, to_date: date | None
) -> str:
    """``invoices_2025-01-01_to_2025-01-31.csv`` style names."""
    if from_date and to_date:
        return f"{stem}_{from_date.isoformat()}_to_{to_date.isoformat()}.{extension}"
    if from_date:
        return f"{stem}_from_{from_date.isoformat()}.{extension}"
    if to_date:
        return f"{stem}_to_{to_date.isoformat()}.{extension}"
    return f"{stem}_all_{date.today().isoformat()}.{extension}"


class ExportInvoicesUseCase:
    """Use case for bulk invoice exports."""

    def __init__(
        self,
        repository: InvoiceRepository | None = None,
        pdf_renderer: IInvoicePdfRenderer | None = None,
    ):
        self._repository = repository
        self._pdf_renderer = pdf_renderer

    async def _get_repository(self) -> InvoiceRepository:
        if self._repository is None:
            from src.application.services import get_invoice_repository

            self._repository = await get_invoice_repository()
        return self._repository

    async def _load(self, from_date: date | None, to_date: date | None) -> list[Invoice]:
        repository = await self._get_repository()
        return await repository.list(InvoiceFilter(from_date=from_date, to_date=to_date))

    async def export_json(self) -> RenderedDocument:
        invoices = await self._load(None, None)
        text = json_codec.dumps_export(invoices)
        logger.info("invoices_exported", format="json", count=len(invoices))
        return RenderedDocument(
            content=text.encode("utf-8"),
            filename=f"invoices_export_{date.today().isoformat()}.json",
            media_type="application/json",
        )

    async def export_csv(
        self, from_date: date | None = None, to_date: date | None = None
    ) -> RenderedDocument:
        invoices = await self._load(from_date, to_date)
        seller = (await self._get_repository()).seller
        text = csv_codec.export_report(invoices, seller, from_date, to_date)
        logger.info(
            "invoices_exported",
            format="csv",
            count=len(invoices),
            from_date=str(from_date) if from_date else None,
            to_date=str(to_date) if to_date else None,
        )
        return RenderedDocument(
            content=text.encode("utf-8"),
            filename=report_filename("invoices", "csv", from_date, to_date),
            media_type="text/csv; charset=utf-8",
        )

    async def export_pdf(
        self, from_date: date | None = None, to_date: date | None = None
    ) -> RenderedDocument:
        invoices = await self._load(from_date, to_date)
        seller = (await self._get_repository()).seller
        renderer = self._pdf_renderer or Fpdf2InvoiceRenderer()
        content = renderer.render_summary(invoices, seller, from_date, to_date)
        logger.info("invoices_exported", format="pdf", count=len(invoices))
        return RenderedDocument(
            content=content,
            filename=report_filename("invoice_summary", "pdf", from_date, to_date),
            media_type="application/pdf",
        )
