"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.

These are the ONLY contracts between API handlers and use cases.
"""

from src.application.dto.requests import (
    CustomerRequest,
    InvoiceCustomerRequest,
    InvoiceLineRequest,
    InvoiceRequest,
    ItemRequest,
)
from src.application.dto.responses import (
    ComponentHealthResponse,
    CustomerListResponse,
    CustomerResponse,
    DashboardResponse,
    ErrorResponse,
    HealthResponse,
    ImportResultResponse,
    InvoiceListResponse,
    InvoiceResponse,
    ItemListResponse,
    ItemResponse,
    MonthSummaryResponse,
)

__all__ = [
    # Requests
    "ItemRequest",
    "CustomerRequest",
    "InvoiceRequest",
    "InvoiceLineRequest",
    "InvoiceCustomerRequest",
    # Responses
    "ItemResponse",
    "ItemListResponse",
    "CustomerResponse",
    "CustomerListResponse",
    "InvoiceResponse",
    "InvoiceListResponse",
    "ImportResultResponse",
    "DashboardResponse",
    "MonthSummaryResponse",
    "HealthResponse",
    "ComponentHealthResponse",
    "ErrorResponse",
]
