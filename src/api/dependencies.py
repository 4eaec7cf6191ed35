"""
Dependency injection container for FastAPI.

Provides service instances to route handlers.
"""

from functools import lru_cache

from src.application.services import (
    get_invoice_repository,
    get_master_data_service,
    get_numbering_service,
)
from src.application.use_cases import (
    ExportInvoicesUseCase,
    ImportInvoicesUseCase,
    RenderInvoiceUseCase,
)
from src.config import Settings, get_settings
from src.core.services import InvoiceNumberingService, InvoiceRepository, MasterDataService


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


# Service dependencies
async def get_repository() -> InvoiceRepository:
    """Get invoice repository."""
    return await get_invoice_repository()


async def get_numbering() -> InvoiceNumberingService:
    """Get invoice numbering service."""
    return await get_numbering_service()


async def get_master_data() -> MasterDataService:
    """Get item and customer service."""
    return await get_master_data_service()


# Use case dependencies
def get_render_invoice_use_case() -> RenderInvoiceUseCase:
    """Get render invoice use case."""
    return RenderInvoiceUseCase()


def get_export_invoices_use_case() -> ExportInvoicesUseCase:
    """Get export invoices use case."""
    return ExportInvoicesUseCase()


def get_import_invoices_use_case() -> ImportInvoicesUseCase:
    """Get import invoices use case."""
    return ImportInvoicesUseCase()
