"""
Bulk export and import endpoints.
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from src.api.dependencies import (
    get_app_settings,
    get_export_invoices_use_case,
    get_import_invoices_use_case,
)
from src.api.routes.invoices import download
from src.application.dto.responses import ImportResultResponse
from src.application.use_cases import ExportInvoicesUseCase, ImportInvoicesUseCase
from src.application.use_cases.import_invoices import ImportFormat
from src.config import Settings

router = APIRouter(prefix="/api/transfer", tags=["transfer"])


@router.get("/export/json")
async def export_json(
    use_case: ExportInvoicesUseCase = Depends(get_export_invoices_use_case),
) -> Response:
    """Download every invoice as a JSON backup."""
    return download(await use_case.export_json())


@router.get("/export/csv")
async def export_csv(
    from_date: date | None = Query(default=None, alias="from"),
    to_date: date | None = Query(default=None, alias="to"),
    use_case: ExportInvoicesUseCase = Depends(get_export_invoices_use_case),
) -> Response:
    """Download the invoice summary report as CSV."""
    return download(await use_case.export_csv(from_date, to_date))


@router.get("/export/pdf")
async def export_pdf(
    from_date: date | None = Query(default=None, alias="from"),
    to_date: date | None = Query(default=None, alias="to"),
    use_case: ExportInvoicesUseCase = Depends(get_export_invoices_use_case),
) -> Response:
    """Download the invoice summary report as PDF."""
    return download(await use_case.export_pdf(from_date, to_date))


async def _import(
    request: Request,
    response: Response,
    fmt: ImportFormat,
    use_case: ImportInvoicesUseCase,
    settings: Settings,
) -> ImportResultResponse:
    body = await request.body()
    if len(body) > settings.api.max_upload_size:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Import file exceeds {settings.api.max_upload_size} bytes",
        )
    if not body.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Empty file",
        )

    result = await use_case.execute(body, fmt)
    if not result.success:
        response.status_code = status.HTTP_400_BAD_REQUEST
    return use_case.to_response(result)


@router.post("/import/json", response_model=ImportResultResponse)
async def import_json(
    request: Request,
    response: Response,
    use_case: ImportInvoicesUseCase = Depends(get_import_invoices_use_case),
    settings: Settings = Depends(get_app_settings),
) -> ImportResultResponse:
    """
    Import invoices from a JSON export sent as the request body.

    Invoices imported before a failure stay saved; the response reports
    how many made it in.
    """
    return await _import(request, response, "json", use_case, settings)


@router.post("/import/csv", response_model=ImportResultResponse)
async def import_csv(
    request: Request,
    response: Response,
    use_case: ImportInvoicesUseCase = Depends(get_import_invoices_use_case),
    settings: Settings = Depends(get_app_settings),
) -> ImportResultResponse:
    """Import invoices from CSV sent as the request body."""
    return await _import(request, response, "csv", use_case, settings)
