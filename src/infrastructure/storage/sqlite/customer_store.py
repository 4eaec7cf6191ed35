"""SQLite implementation of customer storage."""

from datetime import datetime

import aiosqlite

from src.core.entities import Customer
from src.core.interfaces import ICustomerStore
from src.infrastructure.storage.sqlite.connection import get_connection, get_transaction


class SQLiteCustomerStore(ICustomerStore):
    """SQLite implementation of customer storage."""

    async def create(self, customer: Customer) -> Customer:
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO customers (name, contact, address, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    customer.name,
                    customer.contact,
                    customer.address,
                    customer.created_at.isoformat(),
                    customer.updated_at.isoformat(),
                ),
            )
            customer.id = cursor.lastrowid
        return customer

    async def get(self, customer_id: int) -> Customer | None:
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM customers WHERE id = ?", (customer_id,))
            row = await cursor.fetchone()
        return self._row_to_customer(row) if row else None

    async def update(self, customer: Customer) -> bool:
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                UPDATE customers SET name = ?, contact = ?, address = ?, updated_at = ?
                WHERE id = ?
                """,
                (
                    customer.name,
                    customer.contact,
                    customer.address,
                    customer.updated_at.isoformat(),
                    customer.id,
                ),
            )
            return cursor.rowcount > 0

    async def delete(self, customer_id: int) -> bool:
        async with get_transaction() as conn:
            cursor = await conn.execute("DELETE FROM customers WHERE id = ?", (customer_id,))
            return cursor.rowcount > 0

    async def list_all(self) -> list[Customer]:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM customers ORDER BY name COLLATE NOCASE, id"
            )
            rows = await cursor.fetchall()
        return [self._row_to_customer(r) for r in rows]

    @staticmethod
    def _row_to_customer(row: aiosqlite.Row) -> Customer:
        return Customer(
            id=row["id"],
            name=row["name"],
            contact=row["contact"],
            address=row["address"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )
