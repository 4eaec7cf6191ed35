"""
Service factory functions for dependency injection.

This module provides factory functions that wire infrastructure
implementations to core services. Use cases should import from here.

Clean Architecture: Application layer orchestrates DI, not core layer.
"""

from typing import TYPE_CHECKING

from src.config import get_settings
from src.config.settings import Settings
from src.core.entities import BankDetails, Seller
from src.core.services import InvoiceNumberingService, InvoiceRepository, MasterDataService

if TYPE_CHECKING:
    from src.core.interfaces import ICustomerStore, IInvoiceStore, IItemStore, IMetaStore


# Singleton service instances
_numbering_service: InvoiceNumberingService | None = None
_invoice_repository: InvoiceRepository | None = None
_master_data_service: MasterDataService | None = None


def seller_from_settings(settings: Settings | None = None) -> Seller:
    """Build the configured seller identity used for new invoices."""
    seller = (settings or get_settings()).seller
    return Seller(
        business_name=seller.business_name,
        owner=seller.owner,
        address=seller.address,
        contact=seller.contact,
        pan_no=seller.pan_no,
        bank=BankDetails(
            name=seller.bank_name,
            account_name=seller.bank_account_name,
            account_no=seller.bank_account_no,
            ifsc=seller.bank_ifsc,
            upi=seller.bank_upi,
        ),
    )


async def get_numbering_service(
    meta_store: "IMetaStore | None" = None,
    invoice_store: "IInvoiceStore | None" = None,
) -> InvoiceNumberingService:
    """
    Get or create the InvoiceNumberingService.

    Only one instance may exist per process: its lock is what keeps
    concurrent requests from reading the same counter value.
    """
    global _numbering_service

    if _numbering_service is not None and meta_store is None and invoice_store is None:
        return _numbering_service

    # Lazy import infrastructure to avoid circular imports
    from src.infrastructure.storage.sqlite import get_invoice_store, get_meta_store

    settings = get_settings().invoice
    service = InvoiceNumberingService(
        meta_store=meta_store or await get_meta_store(),
        invoice_store=invoice_store or await get_invoice_store(),
        prefix=settings.prefix,
        width=settings.counter_width,
        start=settings.counter_start,
    )

    if meta_store is None and invoice_store is None:
        _numbering_service = service

    return service


async def get_invoice_repository(
    invoice_store: "IInvoiceStore | None" = None,
    numbering: InvoiceNumberingService | None = None,
) -> InvoiceRepository:
    """
    Get or create the InvoiceRepository.

    Args:
        invoice_store: Optional invoice store override
        numbering: Optional numbering service override

    Returns:
        Configured InvoiceRepository
    """
    global _invoice_repository

    if _invoice_repository is not None and invoice_store is None and numbering is None:
        return _invoice_repository

    from src.infrastructure.storage.sqlite import get_invoice_store

    settings = get_settings()
    store = invoice_store or await get_invoice_store()
    repository = InvoiceRepository(
        invoice_store=store,
        numbering=numbering or await get_numbering_service(invoice_store=invoice_store),
        seller=seller_from_settings(settings),
        default_payment_terms=settings.invoice.default_payment_terms,
        default_currency=settings.invoice.default_currency,
    )

    if invoice_store is None and numbering is None:
        _invoice_repository = repository

    return repository


async def get_master_data_service(
    item_store: "IItemStore | None" = None,
    customer_store: "ICustomerStore | None" = None,
) -> MasterDataService:
    global _master_data_service

    if _master_data_service is not None and item_store is None and customer_store is None:
        return _master_data_service

    from src.infrastructure.storage.sqlite import get_customer_store, get_item_store

    service = MasterDataService(
        item_store=item_store or await get_item_store(),
        customer_store=customer_store or await get_customer_store(),
    )

    if item_store is None and customer_store is None:
        _master_data_service = service

    return service


def reset_services() -> None:
    """
    Reset all singleton service instances.

    Useful for testing or when configuration changes.
    """
    global _numbering_service
    global _invoice_repository
    global _master_data_service

    _numbering_service = None
    _invoice_repository = None
    _master_data_service = None


__all__ = [
    "seller_from_settings",
    "get_numbering_service",
    "get_invoice_repository",
    "get_master_data_service",
    "reset_services",
]
