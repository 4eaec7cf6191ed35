"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.
"""

from datetime import date
from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.core.entities import Customer, InvoiceCustomer, InvoiceDraft, InvoiceLine, Item
from src.core.entities.invoice import coerce_date


class ItemRequest(BaseModel):
    """Create or replace a catalog item."""

    name: str = Field(..., min_length=1, max_length=200, examples=["Cotton Shirt"])
    sku: str = Field(default="", max_length=64, examples=["SH-001"])
    price: float = Field(default=0.0, ge=0, examples=[799.0])

    def to_entity(self) -> Item:
        return Item(name=self.name.strip(), sku=self.sku.strip(), price=self.price)


class CustomerRequest(BaseModel):
    """Create or replace a customer."""

    name: str = Field(..., min_length=1, max_length=200, examples=["Ramesh Patil"])
    contact: str = Field(default="", max_length=200)
    address: str = Field(default="", max_length=500)

    def to_entity(self) -> Customer:
        return Customer(
            name=self.name.strip(),
            contact=self.contact.strip(),
            address=self.address.strip(),
        )


class InvoiceLineRequest(BaseModel):
    """One line as entered on the invoice form."""

    item_id: int | None = None
    description: str = Field(default="", max_length=500)
    qty: float = Field(default=0.0, ge=0)
    price: float = Field(default=0.0, ge=0)


class InvoiceCustomerRequest(BaseModel):
    customer_id: int | None = None
    name: str = Field(default="", max_length=200)
    contact: str = Field(default="", max_length=200)
    address: str = Field(default="", max_length=500)


class InvoiceRequest(BaseModel):
    """
    Create or update an invoice.

    ``invoice_number`` is accepted for round-tripping edited invoices but
    is ignored: new invoices get the next number, edits keep theirs.
    """

    invoice_number: str | None = None
    invoice_date: date | None = Field(
        default=None,
        alias="date",
        description="Invoice date (YYYY-MM-DD). Defaults to today.",
        examples=["2025-12-13"],
    )
    customer: InvoiceCustomerRequest = Field(default_factory=InvoiceCustomerRequest)
    lines: list[InvoiceLineRequest] = Field(default_factory=list)
    payment_terms: str | None = None
    currency: str | None = Field(default=None, max_length=8)
    show_pan_no: bool = False

    model_config = {"populate_by_name": True}

    @field_validator("invoice_date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> date | None:
        return coerce_date(v)

    def to_draft(self) -> InvoiceDraft:
        return InvoiceDraft(
            invoice_number=self.invoice_number,
            date=self.invoice_date,
            customer=InvoiceCustomer(**self.customer.model_dump()),
            lines=[InvoiceLine(**line.model_dump()) for line in self.lines],
            payment_terms=self.payment_terms,
            currency=self.currency,
            show_pan_no=self.show_pan_no,
        )

