"""
Invoice repository.

Composes consolidation and numbering over the invoice store:

    Draft -> Saved (number assigned once) -> Saved (edited, same number)* -> Deleted
"""

from datetime import UTC, date, datetime

from src.config import get_logger
from src.core.entities.invoice import Invoice, InvoiceDraft, InvoiceFilter, Seller
from src.core.exceptions import InvoiceNotFoundError
from src.core.interfaces.storage import IInvoiceStore
from src.core.services.consolidation import consolidate_lines
from src.core.services.invoice_filter import apply_invoice_filter
from src.core.services.numbering import InvoiceNumberingService

logger = get_logger(__name__)


class InvoiceRepository:
    """Create, update, delete and list invoices."""

    def __init__(
        self,
        invoice_store: IInvoiceStore,
        numbering: InvoiceNumberingService,
        seller: Seller,
        default_payment_terms: str = "Due on receipt",
        default_currency: str = "INR",
    ):
        self._store = invoice_store
        self._numbering = numbering
        self._seller = seller
        self._default_payment_terms = default_payment_terms
        self._default_currency = default_currency

    @property
    def seller(self) -> Seller:
        return self._seller

    def _build(self, draft: InvoiceDraft, seller: Seller) -> Invoice:
        """Turn a draft into an unsaved invoice with consolidated lines."""
        return Invoice(
            date=draft.date or date.today(),
            customer=draft.customer.model_copy(),
            seller=seller.model_copy(deep=True),
            lines=consolidate_lines(draft.lines),
            payment_terms=draft.payment_terms or self._default_payment_terms,
            currency=draft.currency or self._default_currency,
            show_pan_no=draft.show_pan_no,
        )

    async def create(self, draft: InvoiceDraft) -> Invoice:
        """Save a new invoice, assigning the next invoice number."""
        invoice = self._build(draft, self._seller)

        async with self._numbering.lock:
            invoice = await self._store.create_numbered(
                invoice,
                lambda counter: self._numbering.format(draft.date, counter),
                counter_start=self._numbering.start,
            )

        logger.info(
            "invoice_created",
            invoice_id=invoice.id,
            invoice_number=invoice.invoice_number,
            lines=len(invoice.lines),
            total=invoice.total,
        )
        return invoice

    async def update(self, invoice_id: int, draft: InvoiceDraft) -> Invoice:
        """
        Overwrite an existing invoice in place.

        The stored number, seller snapshot and creation time are kept; any
        number supplied in the draft is ignored. The counter is untouched.
        """
        existing = await self._store.get(invoice_id)
        if existing is None:
            raise InvoiceNotFoundError(invoice_id)

        invoice = self._build(draft, existing.seller)
        invoice.id = existing.id
        invoice.invoice_number = existing.invoice_number
        invoice.created_at = existing.created_at
        invoice.updated_at = datetime.now(UTC)

        if draft.invoice_number and draft.invoice_number != existing.invoice_number:
            logger.warning(
                "invoice_number_change_ignored",
                invoice_id=invoice_id,
                requested=draft.invoice_number,
                kept=existing.invoice_number,
            )

        if not await self._store.update(invoice):
            raise InvoiceNotFoundError(invoice_id)

        logger.info(
            "invoice_updated",
            invoice_id=invoice.id,
            invoice_number=invoice.invoice_number,
            total=invoice.total,
        )
        return invoice

    async def delete(self, invoice_id: int) -> None:
        """Delete an invoice. The counter and master data are not touched."""
        if not await self._store.delete(invoice_id):
            raise InvoiceNotFoundError(invoice_id)
        logger.info("invoice_deleted", invoice_id=invoice_id)

    async def get(self, invoice_id: int) -> Invoice:
        invoice = await self._store.get(invoice_id)
        if invoice is None:
            raise InvoiceNotFoundError(invoice_id)
        return invoice

    async def list(self, invoice_filter: InvoiceFilter | None = None) -> list[Invoice]:
        """All invoices newest first, narrowed by ``invoice_filter``."""
        invoices = await self._store.list_all()
        return apply_invoice_filter(invoices, invoice_filter)
