"""SQLite storage implementations."""

from src.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)
from src.infrastructure.storage.sqlite.customer_store import SQLiteCustomerStore
from src.infrastructure.storage.sqlite.invoice_store import SQLiteInvoiceStore
from src.infrastructure.storage.sqlite.item_store import SQLiteItemStore
from src.infrastructure.storage.sqlite.meta_store import SQLiteMetaStore

# Singleton instances
_item_store: SQLiteItemStore | None = None
_customer_store: SQLiteCustomerStore | None = None
_invoice_store: SQLiteInvoiceStore | None = None
_meta_store: SQLiteMetaStore | None = None


async def get_item_store() -> SQLiteItemStore:
    """Get singleton item store instance."""
    global _item_store
    if _item_store is None:
        _item_store = SQLiteItemStore()
    return _item_store


async def get_customer_store() -> SQLiteCustomerStore:
    """Get singleton customer store instance."""
    global _customer_store
    if _customer_store is None:
        _customer_store = SQLiteCustomerStore()
    return _customer_store


async def get_invoice_store() -> SQLiteInvoiceStore:
    """Get singleton invoice store instance."""
    global _invoice_store
    if _invoice_store is None:
        _invoice_store = SQLiteInvoiceStore()
    return _invoice_store


async def get_meta_store() -> SQLiteMetaStore:
    """Get singleton meta store instance."""
    global _meta_store
    if _meta_store is None:
        _meta_store = SQLiteMetaStore()
    return _meta_store


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    # Store classes
    "SQLiteItemStore",
    "SQLiteCustomerStore",
    "SQLiteInvoiceStore",
    "SQLiteMetaStore",
    # Factory functions
    "get_item_store",
    "get_customer_store",
    "get_invoice_store",
    "get_meta_store",
]
