"""Storage infrastructure implementations."""

from src.infrastructure.storage.sqlite import (
    SQLiteCustomerStore,
    SQLiteInvoiceStore,
    SQLiteItemStore,
    SQLiteMetaStore,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)

__all__ = [
    # SQLite stores
    "SQLiteItemStore",
    "SQLiteCustomerStore",
    "SQLiteInvoiceStore",
    "SQLiteMetaStore",
    # Connection pool
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
]
