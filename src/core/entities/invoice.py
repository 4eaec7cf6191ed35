"""
Invoice domain entities with Pydantic v2 validation.

Line and invoice totals are computed fields: they are derived from
quantities and prices on every read and can never be set directly.
"""

import datetime as dt
from datetime import UTC, date, datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, computed_field, field_validator


def coerce_date(v: Any) -> date | None:
    """Convert string to date, accepting ISO dates, ISO timestamps or common formats."""
    if v is None:
        return None
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, date):
        return v
    if isinstance(v, str):
        v = v.strip()
        if not v or v.lower() in {"none", "null"}:
            return None
        if "T" in v:
            v = v.split("T", 1)[0]
        for fmt in ("%Y-%m-%d", "%d/%m/%Y", "%m/%d/%Y", "%d-%m-%Y"):
            try:
                return datetime.strptime(v, fmt).date()
            except ValueError:
                continue
    raise ValueError(f"Unrecognized date: {v!r}")


def _coerce_number(v: Any) -> float:
    """Convert None/empty to 0.0 and numeric strings to float."""
    if v is None or v == "":
        return 0.0
    if isinstance(v, (int, float)):
        return float(v)
    if isinstance(v, Decimal):
        return float(v)
    s = str(v).strip().replace(",", "")
    if s.lower() in {"none", "nan", "null", ""}:
        return 0.0
    return float(s)


class InvoiceLine(BaseModel):
    """
    One row of an invoice.

    ``item_id`` is a weak reference to the catalog item the row was filled
    from; ``description`` and ``price`` are snapshots and survive deletion of
    that item.
    """

    item_id: int | None = None
    description: str = ""
    qty: float = Field(default=0.0, ge=0)
    price: float = Field(default=0.0, ge=0)

    @field_validator("qty", "price", mode="before")
    @classmethod
    def coerce_numeric(cls, v: Any) -> float:
        return _coerce_number(v)

    @field_validator("description", mode="before")
    @classmethod
    def coerce_string(cls, v: Any) -> str:
        """Ensure description is never None."""
        if v is None:
            return ""
        return str(v)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> float:
        """Line total (qty * price)."""
        return round(self.qty * self.price, 2)


class InvoiceCustomer(BaseModel):
    """Customer details embedded in an invoice at save time."""

    customer_id: int | None = None
    name: str = ""
    contact: str = ""
    address: str = ""

    @field_validator("name", "contact", "address", mode="before")
    @classmethod
    def coerce_string(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v)


class BankDetails(BaseModel):
    """Bank account information."""

    name: str = ""
    account_name: str = ""
    account_no: str = ""
    ifsc: str = ""
    upi: str = ""


class Seller(BaseModel):
    """Business identity printed on every invoice."""

    business_name: str = ""
    owner: str = ""
    address: str = ""
    contact: str = ""
    pan_no: str = ""
    bank: BankDetails = Field(default_factory=BankDetails)


class InvoiceDraft(BaseModel):
    """
    Unsaved invoice contents as composed by the caller.

    ``invoice_number`` is accepted so that edited invoices can round-trip
    through clients, but it is never trusted by the repository.
    """

    invoice_number: str | None = None
    date: dt.date | None = None
    customer: InvoiceCustomer = Field(default_factory=InvoiceCustomer)
    lines: list[InvoiceLine] = Field(default_factory=list)
    payment_terms: str | None = None
    currency: str | None = None
    show_pan_no: bool = False

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: Any):
        return coerce_date(v)


class Invoice(BaseModel):
    """A saved invoice with its customer and seller snapshots."""

    id: int | None = None
    invoice_number: str | None = None
    date: dt.date = Field(default_factory=date.today)
    customer: InvoiceCustomer = Field(default_factory=InvoiceCustomer)
    seller: Seller = Field(default_factory=Seller)
    lines: list[InvoiceLine] = Field(default_factory=list)
    payment_terms: str = "Due on receipt"
    currency: str = "INR"
    show_pan_no: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: Any):
        parsed = coerce_date(v)
        return parsed or date.today()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def subtotal(self) -> float:
        """Sum of line totals."""
        return round(sum(line.total for line in self.lines), 2)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> float:
        """Grand total. There is no tax model, so this equals the subtotal."""
        return self.subtotal

    @property
    def total_qty(self) -> float:
        return sum(line.qty for line in self.lines)


class InvoiceFilter(BaseModel):
    """Conjunctive list filter. Empty fields impose no constraint."""

    customer_query: str | None = None
    invoice_number_query: str | None = None
    from_date: date | None = None
    to_date: date | None = None

    @field_validator("from_date", "to_date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> date | None:
        return coerce_date(v)
