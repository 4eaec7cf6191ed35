"""
Master data service.

CRUD over catalog items and customers. Invoices only keep weak references
to these records, so deletes never cascade into saved invoices.
"""

from datetime import UTC, datetime

from src.config import get_logger
from src.core.entities.catalog import Customer, Item
from src.core.exceptions import CustomerNotFoundError, ItemNotFoundError, ValidationError
from src.core.interfaces.storage import ICustomerStore, IItemStore

logger = get_logger(__name__)


class MasterDataService:
    """Manage items and customers."""

    def __init__(self, item_store: IItemStore, customer_store: ICustomerStore):
        self._items = item_store
        self._customers = customer_store

    # Items

    async def create_item(self, item: Item) -> Item:
        if not item.name.strip():
            raise ValidationError("name", "Item name is required")
        item.id = None
        created = await self._items.create(item)
        logger.info("item_created", item_id=created.id, name=created.name)
        return created

    async def get_item(self, item_id: int) -> Item:
        item = await self._items.get(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item

    async def update_item(self, item_id: int, item: Item) -> Item:
        existing = await self.get_item(item_id)
        if not item.name.strip():
            raise ValidationError("name", "Item name is required")
        item.id = item_id
        item.created_at = existing.created_at
        item.updated_at = datetime.now(UTC)
        if not await self._items.update(item):
            raise ItemNotFoundError(item_id)
        logger.info("item_updated", item_id=item_id)
        return item

    async def delete_item(self, item_id: int) -> None:
        if not await self._items.delete(item_id):
            raise ItemNotFoundError(item_id)
        logger.info("item_deleted", item_id=item_id)

    async def list_items(self) -> list[Item]:
        return await self._items.list_all()

    # Customers

    async def create_customer(self, customer: Customer) -> Customer:
        if not customer.name.strip():
            raise ValidationError("name", "Customer name is required")
        customer.id = None
        created = await self._customers.create(customer)
        logger.info("customer_created", customer_id=created.id, name=created.name)
        return created

    async def get_customer(self, customer_id: int) -> Customer:
        customer = await self._customers.get(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return customer

    async def update_customer(self, customer_id: int, customer: Customer) -> Customer:
        existing = await self.get_customer(customer_id)
        if not customer.name.strip():
            raise ValidationError("name", "Customer name is required")
        customer.id = customer_id
        customer.created_at = existing.created_at
        customer.updated_at = datetime.now(UTC)
        if not await self._customers.update(customer):
            raise CustomerNotFoundError(customer_id)
        logger.info("customer_updated", customer_id=customer_id)
        return customer

    async def delete_customer(self, customer_id: int) -> None:
        if not await self._customers.delete(customer_id):
            raise CustomerNotFoundError(customer_id)
        logger.info("customer_deleted", customer_id=customer_id)

    async def list_customers(self) -> list[Customer]:
        return await self._customers.list_all()
