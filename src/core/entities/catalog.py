"""Master data entities: catalog items and customers."""

from datetime import UTC, datetime

from pydantic import BaseModel, Field


class Item(BaseModel):
    """A sellable catalog item."""

    id: int | None = None
    name: str
    sku: str = ""
    price: float = Field(default=0.0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class Customer(BaseModel):
    """A customer record that invoices snapshot at save time."""

    id: int | None = None
    name: str
    contact: str = ""
    address: str = ""
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
