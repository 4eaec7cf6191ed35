"""
Domain exceptions for the invoicing application.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class InvoicingError(Exception):
    """Base exception for all invoicing errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(InvoicingError):
    """Base exception for storage operations."""

    pass


class NotFoundError(StorageError):
    """Referenced record does not exist."""

    def __init__(self, entity: str, entity_id: int | str, code: str | None = None):
        super().__init__(
            f"{entity.capitalize()} not found: {entity_id}",
            code=code or "NOT_FOUND",
            details={"entity": entity, "id": entity_id},
        )


class InvoiceNotFoundError(NotFoundError):
    """Invoice not found in storage."""

    def __init__(self, invoice_id: int):
        super().__init__("invoice", invoice_id, code="INVOICE_NOT_FOUND")


class ItemNotFoundError(NotFoundError):
    """Catalog item not found in storage."""

    def __init__(self, item_id: int):
        super().__init__("item", item_id, code="ITEM_NOT_FOUND")


class CustomerNotFoundError(NotFoundError):
    """Customer not found in storage."""

    def __init__(self, customer_id: int):
        super().__init__("customer", customer_id, code="CUSTOMER_NOT_FOUND")


class DuplicateInvoiceNumberError(StorageError):
    """Invoice number already assigned to another invoice."""

    def __init__(self, invoice_number: str):
        super().__init__(
            f"Invoice number already exists: {invoice_number}",
            code="DUPLICATE_INVOICE_NUMBER",
            details={"invoice_number": invoice_number},
        )


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


# Validation Exceptions
class ValidationError(InvoicingError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value else None,
            },
        )


class ImportFormatError(ValidationError):
    """Import payload is not in a recognized format."""

    def __init__(self, source: str, reason: str, line: int | None = None):
        super().__init__(field=source, message=reason)
        self.code = "IMPORT_FORMAT_ERROR"
        self.message = reason if line is None else f"{reason} (line {line})"
        self.args = (self.message,)
        self.details.update({"source": source, "line": line})


class ConfigurationError(InvoicingError):
    """Configuration error."""

    pass
