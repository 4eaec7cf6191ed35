"""Response DTOs for API endpoints.

Pydantic v2 models for structured API responses.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field

from src.core.entities import Customer, Invoice, Item
from src.core.services.dashboard import DashboardSummary


class ItemResponse(BaseModel):
    id: int
    name: str
    sku: str
    price: float
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, item: Item) -> "ItemResponse":
        return cls(**item.model_dump())


class ItemListResponse(BaseModel):
    items: list[ItemResponse]
    total: int


class CustomerResponse(BaseModel):
    id: int
    name: str
    contact: str
    address: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerResponse":
        return cls(**customer.model_dump())


class CustomerListResponse(BaseModel):
    customers: list[CustomerResponse]
    total: int


class InvoiceLineResponse(BaseModel):
    """Line in an invoice response."""

    item_id: int | None = None
    description: str
    qty: float
    price: float
    total: float


class InvoiceCustomerResponse(BaseModel):
    customer_id: int | None = None
    name: str
    contact: str
    address: str


class BankDetailsResponse(BaseModel):
    name: str
    account_name: str
    account_no: str
    ifsc: str
    upi: str


class SellerResponse(BaseModel):
    business_name: str
    owner: str
    address: str
    contact: str
    pan_no: str
    bank: BankDetailsResponse


class InvoiceResponse(BaseModel):
    """Saved invoice with derived totals."""

    id: int
    invoice_number: str
    date: date
    customer: InvoiceCustomerResponse
    seller: SellerResponse
    lines: list[InvoiceLineResponse]
    subtotal: float
    total: float
    total_qty: float
    payment_terms: str
    currency: str
    show_pan_no: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, invoice: Invoice) -> "InvoiceResponse":
        return cls(total_qty=invoice.total_qty, **invoice.model_dump())


class InvoiceListResponse(BaseModel):
    invoices: list[InvoiceResponse]
    total: int


class ImportResultResponse(BaseModel):
    """Outcome of a JSON or CSV import."""

    success: bool
    imported: int
    message: str
    invoice_numbers: list[str] = Field(default_factory=list)


class MonthSummaryResponse(BaseModel):
    month: str = Field(..., description="Calendar month as YYYY-MM")
    invoice_count: int
    revenue: float


class DashboardResponse(BaseModel):
    total_invoices: int
    total_revenue: float
    next_invoice_number: str | None = None
    months: list[MonthSummaryResponse]

    @classmethod
    def from_summary(
        cls, summary: DashboardSummary, next_invoice_number: str | None = None
    ) -> "DashboardResponse":
        return cls(
            total_invoices=summary.total_invoices,
            total_revenue=summary.total_revenue,
            next_invoice_number=next_invoice_number,
            months=[
                MonthSummaryResponse(
                    month=m.month, invoice_count=m.invoice_count, revenue=m.revenue
                )
                for m in summary.months
            ],
        )


class ComponentHealthResponse(BaseModel):
    """Health status for a single component."""

    name: str
    available: bool
    detail: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    database: ComponentHealthResponse | None = None
    invoice_counter: int | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. INVOICE_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
