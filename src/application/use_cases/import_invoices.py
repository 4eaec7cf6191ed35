"""
Import Invoices Use Case.

Loads invoices from a JSON export or a CSV file and inserts them as-is.
Imported invoices never consume the invoice counter; missing or
colliding numbers are replaced by ``IMP-`` placeholders. After any insert
the counter is reconciled so new invoices skip the imported numbers.

Failures are reported in the result rather than raised. There is no
rollback: invoices inserted before the failure stay saved.
"""

import secrets
import string
import time
from dataclasses import dataclass, field
from typing import Literal

from src.application.dto.responses import ImportResultResponse
from src.config import get_logger, get_settings
from src.core.entities import Invoice, Seller
from src.core.exceptions import DuplicateInvoiceNumberError, InvoicingError
from src.core.interfaces import IInvoiceStore
from src.core.services import InvoiceNumberingService
from src.infrastructure.transfer import csv_codec, json_codec

logger = get_logger(__name__)

ImportFormat = Literal["json", "csv"]

_PLACEHOLDER_ALPHABET = string.ascii_lowercase + string.digits
_MAX_INSERT_ATTEMPTS = 3


def placeholder_number(with_suffix: bool = False) -> str:
    """``IMP-<epoch ms>``, optionally followed by six random characters."""
    number = f"IMP-{time.time_ns() // 1_000_000}"
    if with_suffix:
        number += "-" + "".join(secrets.choice(_PLACEHOLDER_ALPHABET) for _ in range(6))
    return number


@dataclass
class ImportResult:
    """Result of an import run."""

    success: bool
    imported: int
    message: str
    invoice_numbers: list[str] = field(default_factory=list)


class ImportInvoicesUseCase:
    """
    Use case for importing invoices.

    Flow:
    1. Parse the payload with the JSON or CSV codec
    2. Assign placeholder numbers where missing or already taken
    3. Insert each invoice without touching the counter
    4. Reconcile the counter past any imported numbers
    """

    def __init__(
        self,
        invoice_store: IInvoiceStore | None = None,
        seller: Seller | None = None,
        numbering: InvoiceNumberingService | None = None,
    ):
        self._invoice_store = invoice_store
        self._seller = seller
        self._numbering = numbering

    async def _get_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from src.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def _get_numbering(self) -> InvoiceNumberingService:
        if self._numbering is None:
            from src.application.services import get_numbering_service

            self._numbering = await get_numbering_service()
        return self._numbering

    def _get_seller(self) -> Seller:
        if self._seller is None:
            from src.application.services import seller_from_settings

            self._seller = seller_from_settings()
        return self._seller

    def _parse(self, payload: str, fmt: ImportFormat) -> list[Invoice]:
        defaults = get_settings().invoice
        codec = json_codec if fmt == "json" else csv_codec
        return codec.parse_import(
            payload,
            self._get_seller(),
            default_payment_terms=defaults.default_payment_terms,
            default_currency=defaults.default_currency,
        )

    async def _insert(self, store: IInvoiceStore, invoice: Invoice, fmt: ImportFormat) -> None:
        requested = invoice.invoice_number
        if not requested:
            invoice.invoice_number = placeholder_number(with_suffix=fmt == "csv")
        elif await store.number_exists(requested):
            invoice.invoice_number = placeholder_number(with_suffix=True)
            logger.warning(
                "import_number_collision",
                requested=requested,
                assigned=invoice.invoice_number,
            )

        for attempt in range(1, _MAX_INSERT_ATTEMPTS + 1):
            try:
                await store.insert(invoice)
                return
            except DuplicateInvoiceNumberError:
                if attempt == _MAX_INSERT_ATTEMPTS:
                    raise
                invoice.invoice_number = placeholder_number(with_suffix=True)

    async def _reconcile(self, imported: list[str]) -> None:
        """Keep new invoices from colliding with imported numbers."""
        if imported:
            numbering = await self._get_numbering()
            await numbering.reconcile()

    async def execute(self, payload: str | bytes, fmt: ImportFormat = "json") -> ImportResult:
        """
        Import invoices from ``payload``.

        Args:
            payload: File contents
            fmt: "json" or "csv"

        Returns:
            ImportResult; ``success`` is False when parsing or inserting failed
        """
        if isinstance(payload, bytes):
            payload = payload.decode("utf-8-sig")

        label = "Import" if fmt == "json" else "CSV import"
        logger.info("import_started", format=fmt, size=len(payload))

        store = await self._get_store()
        imported: list[str] = []
        try:
            invoices = self._parse(payload, fmt)
            for invoice in invoices:
                await self._insert(store, invoice, fmt)
                imported.append(invoice.invoice_number or "")
        except (InvoicingError, ValueError) as e:
            message = e.message if isinstance(e, InvoicingError) else str(e)
            logger.error(
                "import_failed",
                format=fmt,
                imported=len(imported),
                error=message,
            )
            await self._reconcile(imported)
            return ImportResult(
                success=False,
                imported=len(imported),
                message=f"{label} failed: {message}",
                invoice_numbers=imported,
            )

        await self._reconcile(imported)
        suffix = " from CSV" if fmt == "csv" else ""
        logger.info("import_complete", format=fmt, imported=len(imported))
        return ImportResult(
            success=True,
            imported=len(imported),
            message=f"Successfully imported {len(imported)} invoices{suffix}",
            invoice_numbers=imported,
        )

    @staticmethod
    def to_response(result: ImportResult) -> ImportResultResponse:
        """Convert result to API response."""
        return ImportResultResponse(
            success=result.success,
            imported=result.imported,
            message=result.message,
            invoice_numbers=result.invoice_numbers,
        )
