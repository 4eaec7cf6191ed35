"""API route modules."""

from src.api.routes.customers import router as customers_router
from src.api.routes.dashboard import router as dashboard_router
from src.api.routes.health import router as health_router
from src.api.routes.invoices import router as invoices_router
from src.api.routes.items import router as items_router
from src.api.routes.transfer import router as transfer_router

__all__ = [
    "health_router",
    "items_router",
    "customers_router",
    "invoices_router",
    "transfer_router",
    "dashboard_router",
]
