"""Infrastructure layer implementations."""

from src.infrastructure import pdf, storage, transfer

__all__ = ["storage", "pdf", "transfer"]
