"""
Invoice numbering.

Numbers look like ``YG-20251213-0004``: business prefix, invoice date as
YYYYMMDD, and a zero-padded global counter. The counter never resets; it
is read from the meta store, used once, and persisted incremented by one
inside the same transaction that inserts the invoice.
"""

import asyncio
import re
from datetime import date, datetime

from src.config import get_logger
from src.core.entities.meta import INVOICE_COUNTER_KEY
from src.core.interfaces.storage import IInvoiceStore, IMetaStore

logger = get_logger(__name__)


def next_invoice_number(
    invoice_date: date | None,
    counter: int,
    prefix: str = "YG",
    width: int = 4,
) -> str:
    """Format the invoice number for ``counter`` on ``invoice_date``."""
    effective = invoice_date or datetime.now().date()
    return f"{prefix}-{effective:%Y%m%d}-{str(counter).zfill(width)}"


def parse_counter(invoice_number: str, prefix: str) -> int | None:
    """Extract the counter suffix from a number with the given prefix."""
    match = re.fullmatch(rf"{re.escape(prefix)}-\d{{8}}-(\d+)", invoice_number)
    if not match:
        return None
    return int(match.group(1))


class InvoiceNumberingService:
    """
    Owns the invoice counter.

    ``lock`` serializes the read-increment-persist section so concurrent
    requests in one process never observe the same counter value.
    """

    def __init__(
        self,
        meta_store: IMetaStore,
        invoice_store: IInvoiceStore,
        prefix: str = "YG",
        width: int = 4,
        start: int = 1,
    ):
        self._meta_store = meta_store
        self._invoice_store = invoice_store
        self.prefix = prefix
        self.width = width
        self.start = start
        self.lock = asyncio.Lock()

    def format(self, invoice_date: date | None, counter: int) -> str:
        return next_invoice_number(invoice_date, counter, self.prefix, self.width)

    async def current(self) -> int:
        """Counter value the next new invoice will use."""
        value = await self._meta_store.get_value(INVOICE_COUNTER_KEY)
        return value if value else self.start

    async def ensure_counter(self) -> int:
        """Initialize the persisted counter if it is missing."""
        value = await self._meta_store.get_value(INVOICE_COUNTER_KEY)
        if not value:
            value = self.start
            await self._meta_store.set_value(INVOICE_COUNTER_KEY, value)
            logger.info("invoice_counter_initialized", value=value)
        return value

    async def reconcile(self) -> int:
        """
        Raise the counter above every number already issued.

        Repairs databases where invoices were written without consuming the
        counter (imports, interrupted legacy writes). Never lowers it.
        """
        async with self.lock:
            current = await self.ensure_counter()
            numbers = await self._invoice_store.list_numbers(f"{self.prefix}-")
            suffixes = [
                n for n in (parse_counter(num, self.prefix) for num in numbers) if n is not None
            ]
            if suffixes and max(suffixes) >= current:
                repaired = max(suffixes) + 1
                await self._meta_store.set_value(INVOICE_COUNTER_KEY, repaired)
                logger.warning(
                    "invoice_counter_reconciled",
                    previous=current,
                    value=repaired,
                )
                return repaired
            return current
