"""Unit tests for MasterDataService."""

from unittest.mock import AsyncMock

import pytest

from src.core.entities import Customer, Item
from src.core.exceptions import CustomerNotFoundError, ItemNotFoundError, ValidationError
from src.core.services import MasterDataService


@pytest.fixture
def item_store():
    store = AsyncMock()

    async def create(item):
        item.id = 1
        return item

    store.create.side_effect = create
    store.update.return_value = True
    store.delete.return_value = True
    return store


@pytest.fixture
def customer_store():
    store = AsyncMock()

    async def create(customer):
        customer.id = 2
        return customer

    store.create.side_effect = create
    store.update.return_value = True
    store.delete.return_value = True
    return store


@pytest.fixture
def service(item_store, customer_store):
    return MasterDataService(item_store=item_store, customer_store=customer_store)


class TestItems:
    async def test_create(self, service):
        item = await service.create_item(Item(name="Cotton Shirt", price=500))
        assert item.id == 1

    async def test_create_ignores_client_id(self, service, item_store):
        await service.create_item(Item(id=55, name="Cotton Shirt"))
        assert item_store.create.await_args.args[0].id == 1

    async def test_blank_name_rejected(self, service, item_store):
        with pytest.raises(ValidationError):
            await service.create_item(Item(name="   "))
        item_store.create.assert_not_awaited()

    async def test_get_missing(self, service, item_store):
        item_store.get.return_value = None
        with pytest.raises(ItemNotFoundError):
            await service.get_item(4)

    async def test_update_keeps_created_at(self, service, item_store):
        existing = Item(id=4, name="Old")
        item_store.get.return_value = existing

        updated = await service.update_item(4, Item(name="New", price=10))

        assert updated.id == 4
        assert updated.name == "New"
        assert updated.created_at == existing.created_at

    async def test_update_missing(self, service, item_store):
        item_store.get.return_value = None
        with pytest.raises(ItemNotFoundError):
            await service.update_item(4, Item(name="New"))

    async def test_delete_missing(self, service, item_store):
        item_store.delete.return_value = False
        with pytest.raises(ItemNotFoundError):
            await service.delete_item(4)


class TestCustomers:
    async def test_create(self, service):
        customer = await service.create_customer(Customer(name="Ramesh Patil"))
        assert customer.id == 2

    async def test_blank_name_rejected(self, service):
        with pytest.raises(ValidationError):
            await service.create_customer(Customer(name=""))

    async def test_get_missing(self, service, customer_store):
        customer_store.get.return_value = None
        with pytest.raises(CustomerNotFoundError):
            await service.get_customer(4)

    async def test_delete_missing(self, service, customer_store):
        customer_store.delete.return_value = False
        with pytest.raises(CustomerNotFoundError):
            await service.delete_customer(4)

    async def test_list(self, service, customer_store):
        customer_store.list_all.return_value = [Customer(id=1, name="A")]
        assert len(await service.list_customers()) == 1
