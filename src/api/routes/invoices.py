"""
Invoice management endpoints.
"""

from datetime import date

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import HTMLResponse, Response

from src.api.dependencies import get_render_invoice_use_case, get_repository
from src.application.dto.requests import InvoiceRequest
from src.application.dto.responses import ErrorResponse, InvoiceListResponse, InvoiceResponse
from src.application.use_cases import RenderedDocument, RenderInvoiceUseCase
from src.core.entities import InvoiceFilter
from src.core.services import InvoiceRepository

router = APIRouter(prefix="/api/invoices", tags=["invoices"])


def download(document: RenderedDocument, disposition: str = "attachment") -> Response:
    """Wrap a rendered document in a file download response."""
    return Response(
        content=document.content,
        media_type=document.media_type,
        headers={
            "Content-Disposition": f'{disposition}; filename="{document.filename}"',
        },
    )


@router.post(
    "",
    response_model=InvoiceResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse, "description": "Invalid invoice"}},
)
async def create_invoice(
    request: InvoiceRequest,
    repository: InvoiceRepository = Depends(get_repository),
) -> InvoiceResponse:
    """
    Save a new invoice.

    Lines with the same item are merged and the next invoice number is
    assigned in the same transaction that stores the invoice.
    """
    invoice = await repository.create(request.to_draft())
    return InvoiceResponse.from_entity(invoice)


@router.get("", response_model=InvoiceListResponse)
async def list_invoices(
    customer: str | None = Query(default=None, description="Customer name contains"),
    invoice_number: str | None = Query(default=None, description="Invoice number contains"),
    from_date: date | None = Query(default=None, alias="from"),
    to_date: date | None = Query(default=None, alias="to"),
    repository: InvoiceRepository = Depends(get_repository),
) -> InvoiceListResponse:
    """List invoices, newest first, with optional filters."""
    invoices = await repository.list(
        InvoiceFilter(
            customer_query=customer,
            invoice_number_query=invoice_number,
            from_date=from_date,
            to_date=to_date,
        )
    )
    return InvoiceListResponse(
        invoices=[InvoiceResponse.from_entity(i) for i in invoices],
        total=len(invoices),
    )


@router.get(
    "/{invoice_id}",
    response_model=InvoiceResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_invoice(
    invoice_id: int,
    repository: InvoiceRepository = Depends(get_repository),
) -> InvoiceResponse:
    return InvoiceResponse.from_entity(await repository.get(invoice_id))


@router.put(
    "/{invoice_id}",
    response_model=InvoiceResponse,
    responses={404: {"model": ErrorResponse}},
)
async def update_invoice(
    invoice_id: int,
    request: InvoiceRequest,
    repository: InvoiceRepository = Depends(get_repository),
) -> InvoiceResponse:
    """Replace an invoice's contents. The invoice number never changes."""
    invoice = await repository.update(invoice_id, request.to_draft())
    return InvoiceResponse.from_entity(invoice)


@router.delete(
    "/{invoice_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
async def delete_invoice(
    invoice_id: int,
    repository: InvoiceRepository = Depends(get_repository),
) -> None:
    await repository.delete(invoice_id)


@router.get(
    "/{invoice_id}/pdf",
    responses={404: {"model": ErrorResponse}},
)
async def invoice_pdf(
    invoice_id: int,
    use_case: RenderInvoiceUseCase = Depends(get_render_invoice_use_case),
) -> Response:
    """Download the invoice as a PDF."""
    return download(await use_case.pdf(invoice_id))


@router.get(
    "/{invoice_id}/print",
    response_class=HTMLResponse,
    responses={404: {"model": ErrorResponse}},
)
async def invoice_print(
    invoice_id: int,
    use_case: RenderInvoiceUseCase = Depends(get_render_invoice_use_case),
) -> HTMLResponse:
    """Printable HTML page that opens the browser print dialog once loaded."""
    document = await use_case.html(invoice_id)
    return HTMLResponse(content=document.content.decode("utf-8"))


@router.get(
    "/{invoice_id}/csv",
    responses={404: {"model": ErrorResponse}},
)
async def invoice_csv(
    invoice_id: int,
    use_case: RenderInvoiceUseCase = Depends(get_render_invoice_use_case),
) -> Response:
    """Download the invoice in the tagged CSV format."""
    return download(await use_case.csv(invoice_id))
