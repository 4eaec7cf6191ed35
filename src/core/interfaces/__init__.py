"""Core interfaces (abstract base classes)."""

from src.core.interfaces.storage import (
    ICustomerStore,
    IInvoiceStore,
    IItemStore,
    IMetaStore,
)

__all__ = [
    "ICustomerStore",
    "IInvoiceStore",
    "IItemStore",
    "IMetaStore",
]
