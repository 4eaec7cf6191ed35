"""
SQLite implementation of invoice storage.

Invoices live in ``invoices`` with their lines in ``invoice_lines``. The
seller snapshot is stored as JSON. Numbered creation reads and advances
the ``meta`` counter inside the same transaction as the insert.
"""

import json
from collections.abc import Callable
from datetime import date, datetime

import aiosqlite

from src.config import get_logger
from src.core.entities import (
    INVOICE_COUNTER_KEY,
    Invoice,
    InvoiceCustomer,
    InvoiceLine,
    Seller,
)
from src.core.exceptions import DatabaseError, DuplicateInvoiceNumberError
from src.core.interfaces import IInvoiceStore
from src.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)


class SQLiteInvoiceStore(IInvoiceStore):
    """SQLite implementation of invoice storage."""

    async def create_numbered(
        self,
        invoice: Invoice,
        assign_number: Callable[[int], str],
        counter_start: int = 1,
    ) -> Invoice:
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "SELECT value FROM meta WHERE key = ?", (INVOICE_COUNTER_KEY,)
            )
            row = await cursor.fetchone()
            counter = row["value"] if row and row["value"] else counter_start

            invoice.invoice_number = assign_number(counter)
            await self._insert(conn, invoice)

            await conn.execute(
                """
                INSERT INTO meta (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                (INVOICE_COUNTER_KEY, counter + 1),
            )

        logger.debug(
            "invoice_counter_advanced",
            invoice_number=invoice.invoice_number,
            counter=counter + 1,
        )
        return invoice

    async def insert(self, invoice: Invoice) -> Invoice:
        async with get_transaction() as conn:
            await self._insert(conn, invoice)
        return invoice

    async def _insert(self, conn: aiosqlite.Connection, invoice: Invoice) -> None:
        """Insert header and lines on an open transaction."""
        try:
            cursor = await conn.execute(
                """
                INSERT INTO invoices (
                    invoice_number, date, customer_id, customer_name, customer_contact,
                    customer_address, seller_json, payment_terms, currency, show_pan_no,
                    created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    invoice.invoice_number,
                    invoice.date.isoformat(),
                    invoice.customer.customer_id,
                    invoice.customer.name,
                    invoice.customer.contact,
                    invoice.customer.address,
                    json.dumps(invoice.seller.model_dump()),
                    invoice.payment_terms,
                    invoice.currency,
                    int(invoice.show_pan_no),
                    invoice.created_at.isoformat(),
                    invoice.updated_at.isoformat(),
                ),
            )
        except aiosqlite.IntegrityError as e:
            if "invoice_number" in str(e):
                raise DuplicateInvoiceNumberError(invoice.invoice_number or "") from e
            raise DatabaseError("insert invoice", str(e)) from e
        invoice.id = cursor.lastrowid
        await self._insert_lines(conn, invoice.id, invoice.lines)

    async def _insert_lines(
        self, conn: aiosqlite.Connection, invoice_id: int, lines: list[InvoiceLine]
    ) -> None:
        await conn.executemany(
            """
            INSERT INTO invoice_lines (
                invoice_id, position, item_id, description, qty, price, total
            ) VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            [
                (
                    invoice_id,
                    position,
                    line.item_id,
                    line.description,
                    line.qty,
                    line.price,
                    line.total,
                )
                for position, line in enumerate(lines, start=1)
            ],
        )

    async def get(self, invoice_id: int) -> Invoice | None:
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM invoices WHERE id = ?", (invoice_id,))
            row = await cursor.fetchone()
            if row is None:
                return None

            lines_cursor = await conn.execute(
                "SELECT * FROM invoice_lines WHERE invoice_id = ? ORDER BY position",
                (invoice_id,),
            )
            lines_rows = await lines_cursor.fetchall()

        invoice = self._row_to_invoice(row)
        invoice.lines = [self._row_to_line(r) for r in lines_rows]
        return invoice

    async def number_exists(self, invoice_number: str) -> bool:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT 1 FROM invoices WHERE invoice_number = ?", (invoice_number,)
            )
            return await cursor.fetchone() is not None

    async def update(self, invoice: Invoice) -> bool:
        """Overwrite header fields and replace all lines."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                UPDATE invoices SET
                    date = ?, customer_id = ?, customer_name = ?, customer_contact = ?,
                    customer_address = ?, seller_json = ?, payment_terms = ?, currency = ?,
                    show_pan_no = ?, updated_at = ?
                WHERE id = ?
                """,
                (
                    invoice.date.isoformat(),
                    invoice.customer.customer_id,
                    invoice.customer.name,
                    invoice.customer.contact,
                    invoice.customer.address,
                    json.dumps(invoice.seller.model_dump()),
                    invoice.payment_terms,
                    invoice.currency,
                    int(invoice.show_pan_no),
                    invoice.updated_at.isoformat(),
                    invoice.id,
                ),
            )
            if cursor.rowcount == 0:
                return False

            await conn.execute("DELETE FROM invoice_lines WHERE invoice_id = ?", (invoice.id,))
            await self._insert_lines(conn, invoice.id, invoice.lines)
            return True

    async def delete(self, invoice_id: int) -> bool:
        """Delete invoice; lines go with it via ON DELETE CASCADE."""
        async with get_transaction() as conn:
            cursor = await conn.execute("DELETE FROM invoices WHERE id = ?", (invoice_id,))
            return cursor.rowcount > 0

    async def list_all(self) -> list[Invoice]:
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM invoices ORDER BY date DESC, id DESC")
            rows = await cursor.fetchall()

            lines_cursor = await conn.execute(
                "SELECT * FROM invoice_lines ORDER BY invoice_id, position"
            )
            lines_rows = await lines_cursor.fetchall()

        lines_by_invoice: dict[int, list[InvoiceLine]] = {}
        for r in lines_rows:
            lines_by_invoice.setdefault(r["invoice_id"], []).append(self._row_to_line(r))

        invoices = []
        for row in rows:
            invoice = self._row_to_invoice(row)
            invoice.lines = lines_by_invoice.get(invoice.id, [])
            invoices.append(invoice)
        return invoices

    async def list_numbers(self, prefix: str) -> list[str]:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT invoice_number FROM invoices WHERE substr(invoice_number, 1, ?) = ?",
                (len(prefix), prefix),
            )
            rows = await cursor.fetchall()
        return [row[0] for row in rows]

    @staticmethod
    def _row_to_invoice(row: aiosqlite.Row) -> Invoice:
        seller_data = json.loads(row["seller_json"]) if row["seller_json"] else {}
        return Invoice(
            id=row["id"],
            invoice_number=row["invoice_number"],
            date=date.fromisoformat(row["date"]),
            customer=InvoiceCustomer(
                customer_id=row["customer_id"],
                name=row["customer_name"],
                contact=row["customer_contact"],
                address=row["customer_address"],
            ),
            seller=Seller.model_validate(seller_data),
            payment_terms=row["payment_terms"],
            currency=row["currency"],
            show_pan_no=bool(row["show_pan_no"]),
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )

    @staticmethod
    def _row_to_line(row: aiosqlite.Row) -> InvoiceLine:
        return InvoiceLine(
            item_id=row["item_id"],
            description=row["description"],
            qty=row["qty"],
            price=row["price"],
        )
