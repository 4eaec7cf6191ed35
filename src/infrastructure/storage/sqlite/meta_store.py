"""SQLite key/value store for integer metadata such as the invoice counter."""

from src.core.interfaces import IMetaStore
from src.infrastructure.storage.sqlite.connection import get_connection, get_transaction


class SQLiteMetaStore(IMetaStore):
    """Reads and upserts rows of the ``meta`` table."""

    async def get_value(self, key: str) -> int | None:
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT value FROM meta WHERE key = ?", (key,))
            row = await cursor.fetchone()
        return row["value"] if row else None

    async def set_value(self, key: str, value: int) -> None:
        async with get_transaction() as conn:
            await conn.execute(
                """
                INSERT INTO meta (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                (key, value),
            )
