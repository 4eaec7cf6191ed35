"""Unit tests for storage interface abstract classes."""

import pytest

from src.core.interfaces.storage import ICustomerStore, IInvoiceStore, IItemStore, IMetaStore


class TestIInvoiceStoreInterface:
    """Tests for IInvoiceStore abstract interface."""

    def test_is_abstract_class(self):
        with pytest.raises(TypeError, match="Can't instantiate abstract class"):
            IInvoiceStore()

    def test_all_abstract_methods(self):
        expected = {
            "create_numbered",
            "insert",
            "get",
            "number_exists",
            "update",
            "delete",
            "list_all",
            "list_numbers",
        }
        assert set(IInvoiceStore.__abstractmethods__) == expected


@pytest.mark.parametrize("interface", [IItemStore, ICustomerStore])
def test_master_data_stores_share_crud(interface):
    assert set(interface.__abstractmethods__) == {
        "create",
        "get",
        "update",
        "delete",
        "list_all",
    }


def test_meta_store_methods():
    assert set(IMetaStore.__abstractmethods__) == {"get_value", "set_value"}
