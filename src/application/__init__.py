"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services
3. Providing factory functions for dependency injection
"""

from src.application.dto import (
    CustomerRequest,
    CustomerResponse,
    DashboardResponse,
    ErrorResponse,
    HealthResponse,
    ImportResultResponse,
    InvoiceRequest,
    InvoiceResponse,
    ItemRequest,
    ItemResponse,
)
from src.application.services import (
    get_invoice_repository,
    get_master_data_service,
    get_numbering_service,
    reset_services,
    seller_from_settings,
)
from src.application.use_cases import (
    ExportInvoicesUseCase,
    ImportInvoicesUseCase,
    ImportResult,
    RenderedDocument,
    RenderInvoiceUseCase,
)

__all__ = [
    # Request DTOs
    "ItemRequest",
    "CustomerRequest",
    "InvoiceRequest",
    # Response DTOs
    "ItemResponse",
    "CustomerResponse",
    "InvoiceResponse",
    "ImportResultResponse",
    "DashboardResponse",
    "HealthResponse",
    "ErrorResponse",
    # Services
    "get_numbering_service",
    "get_invoice_repository",
    "get_master_data_service",
    "seller_from_settings",
    "reset_services",
    # Use cases
    "ExportInvoicesUseCase",
    "ImportInvoicesUseCase",
    "ImportResult",
    "RenderInvoiceUseCase",
    "RenderedDocument",
]
