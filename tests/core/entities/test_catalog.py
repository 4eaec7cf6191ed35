"""Unit tests for catalog item and customer entities."""

import pytest
from pydantic import ValidationError

from src.core.entities import Customer, Item


class TestItem:
    def test_defaults(self):
        item = Item(name="Cotton Shirt")
        assert item.id is None
        assert item.sku == ""
        assert item.price == 0.0
        assert item.created_at.tzinfo is not None

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            Item(name="Cotton Shirt", price=-1)


class TestCustomer:
    def test_defaults(self):
        customer = Customer(name="Ramesh Patil")
        assert customer.contact == ""
        assert customer.address == ""

    def test_name_required(self):
        with pytest.raises(ValidationError):
            Customer()
