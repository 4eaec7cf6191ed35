"""
Abstract interfaces for storage providers.

Defines contracts for the item, customer, invoice, and meta stores.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from src.core.entities.catalog import Customer, Item
from src.core.entities.invoice import Invoice


class IItemStore(ABC):
    """Abstract interface for catalog item storage."""

    @abstractmethod
    async def create(self, item: Item) -> Item:
        """Insert a new item and assign its ID."""
        pass

    @abstractmethod
    async def get(self, item_id: int) -> Item | None:
        """Get item by ID."""
        pass

    @abstractmethod
    async def update(self, item: Item) -> bool:
        """Overwrite an existing item. Returns False if it does not exist."""
        pass

    @abstractmethod
    async def delete(self, item_id: int) -> bool:
        """Delete item by ID."""
        pass

    @abstractmethod
    async def list_all(self) -> list[Item]:
        """List all items ordered by name."""
        pass


class ICustomerStore(ABC):
    """Abstract interface for customer storage."""

    @abstractmethod
    async def create(self, customer: Customer) -> Customer:
        """Insert a new customer and assign its ID."""
        pass

    @abstractmethod
    async def get(self, customer_id: int) -> Customer | None:
        """Get customer by ID."""
        pass

    @abstractmethod
    async def update(self, customer: Customer) -> bool:
        """Overwrite an existing customer. Returns False if it does not exist."""
        pass

    @abstractmethod
    async def delete(self, customer_id: int) -> bool:
        """Delete customer by ID."""
        pass

    @abstractmethod
    async def list_all(self) -> list[Customer]:
        """List all customers ordered by name."""
        pass


class IInvoiceStore(ABC):
    """
    Abstract interface for invoice storage.

    Invoices are stored with their lines; ``invoice_number`` is unique.
    """

    @abstractmethod
    async def create_numbered(
        self,
        invoice: Invoice,
        assign_number: Callable[[int], str],
        counter_start: int = 1,
    ) -> Invoice:
        """
        Insert a new invoice and consume the invoice counter atomically.

        Reads the counter (``counter_start`` if missing), sets
        ``invoice.invoice_number = assign_number(counter)``, inserts the
        invoice and persists ``counter + 1``, all in one transaction.
        """
        pass

    @abstractmethod
    async def insert(self, invoice: Invoice) -> Invoice:
        """Insert an invoice that already carries its number."""
        pass

    @abstractmethod
    async def get(self, invoice_id: int) -> Invoice | None:
        """Get invoice by ID with lines."""
        pass

    @abstractmethod
    async def number_exists(self, invoice_number: str) -> bool:
        """Check whether an invoice number is already taken."""
        pass

    @abstractmethod
    async def update(self, invoice: Invoice) -> bool:
        """Overwrite header and lines of an existing invoice."""
        pass

    @abstractmethod
    async def delete(self, invoice_id: int) -> bool:
        """Delete invoice and its lines."""
        pass

    @abstractmethod
    async def list_all(self) -> list[Invoice]:
        """List all invoices, newest date first, ties by ID descending."""
        pass

    @abstractmethod
    async def list_numbers(self, prefix: str) -> list[str]:
        """List invoice numbers that start with ``prefix``."""
        pass


class IMetaStore(ABC):
    """Abstract interface for the key/value meta collection."""

    @abstractmethod
    async def get_value(self, key: str) -> int | None:
        """Read an integer meta value."""
        pass

    @abstractmethod
    async def set_value(self, key: str, value: int) -> None:
        """Upsert an integer meta value."""
        pass
