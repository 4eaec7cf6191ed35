"""SQLite implementation of catalog item storage."""

from datetime import datetime

import aiosqlite

from src.config import get_logger
from src.core.entities import Item
from src.core.interfaces import IItemStore
from src.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)


class SQLiteItemStore(IItemStore):
    """SQLite implementation of catalog item storage."""

    async def create(self, item: Item) -> Item:
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO items (name, sku, price, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    item.name,
                    item.sku,
                    item.price,
                    item.created_at.isoformat(),
                    item.updated_at.isoformat(),
                ),
            )
            item.id = cursor.lastrowid
        return item

    async def get(self, item_id: int) -> Item | None:
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM items WHERE id = ?", (item_id,))
            row = await cursor.fetchone()
        return self._row_to_item(row) if row else None

    async def update(self, item: Item) -> bool:
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "UPDATE items SET name = ?, sku = ?, price = ?, updated_at = ? WHERE id = ?",
                (item.name, item.sku, item.price, item.updated_at.isoformat(), item.id),
            )
            return cursor.rowcount > 0

    async def delete(self, item_id: int) -> bool:
        async with get_transaction() as conn:
            cursor = await conn.execute("DELETE FROM items WHERE id = ?", (item_id,))
            return cursor.rowcount > 0

    async def list_all(self) -> list[Item]:
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM items ORDER BY name COLLATE NOCASE, id")
            rows = await cursor.fetchall()
        return [self._row_to_item(r) for r in rows]

    @staticmethod
    def _row_to_item(row: aiosqlite.Row) -> Item:
        return Item(
            id=row["id"],
            name=row["name"],
            sku=row["sku"],
            price=row["price"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )
