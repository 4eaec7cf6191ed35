"""
Dashboard endpoint.
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_numbering, get_repository
from src.application.dto.responses import DashboardResponse
from src.core.services import InvoiceNumberingService, InvoiceRepository, summarize

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
async def dashboard(
    repository: InvoiceRepository = Depends(get_repository),
    numbering: InvoiceNumberingService = Depends(get_numbering),
) -> DashboardResponse:
    """Invoice count, revenue and per-month totals, plus the next number to be issued."""
    summary = summarize(await repository.list())
    next_number = numbering.format(None, await numbering.current())
    return DashboardResponse.from_summary(summary, next_invoice_number=next_number)
