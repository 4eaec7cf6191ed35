"""
Health check endpoints.
"""

import time

from fastapi import APIRouter

from src.application.dto.responses import ComponentHealthResponse, HealthResponse
from src.config import get_settings

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check.

    Returns service status and uptime.
    """
    return HealthResponse(
        status="healthy",
        version=get_settings().app_version,
        uptime_seconds=time.time() - _start_time,
    )


@router.get("/db", response_model=HealthResponse)
async def db_health() -> HealthResponse:
    """
    Database health check.

    Tests SQLite connectivity and reports the invoice counter.
    """
    from src.application.services import get_numbering_service
    from src.infrastructure.storage.sqlite import get_connection

    counter: int | None = None
    try:
        start = time.time()
        async with get_connection() as conn:
            await conn.execute("SELECT 1")
        latency = (time.time() - start) * 1000
        counter = await (await get_numbering_service()).current()

        db_status = ComponentHealthResponse(
            name="sqlite",
            available=True,
            detail=f"{latency:.1f}ms",
        )

    except Exception as e:
        db_status = ComponentHealthResponse(
            name="sqlite",
            available=False,
            detail=str(e),
        )

    return HealthResponse(
        status="healthy" if db_status.available else "unhealthy",
        version=get_settings().app_version,
        uptime_seconds=time.time() - _start_time,
        database=db_status,
        invoice_counter=counter,
    )
