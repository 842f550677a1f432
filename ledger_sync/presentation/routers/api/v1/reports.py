"""Cached report resource handlers.

Handlers:
    get_cached_reports - GET /reports/{period}
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from fastapi.responses import JSONResponse

from ledger_sync.application.queries.handlers.get_cached_reports_handler import (
    GetCachedReportsHandler,
)
from ledger_sync.application.queries.report_queries import GetCachedReports
from ledger_sync.core.container import get_get_cached_reports_handler
from ledger_sync.core.result import Failure, Success
from ledger_sync.presentation.routers.api.middleware import CurrentCaller
from ledger_sync.presentation.routers.api.v1.errors import ErrorResponseBuilder
from ledger_sync.schemas.report_schemas import CachedReportsResponse

reports_router = APIRouter(prefix="/reports", tags=["Reports"])


@reports_router.get("/{period}", response_model=None)
async def get_cached_reports(
    caller: CurrentCaller,
    period: Annotated[int, Path(ge=2000, le=2100, description="Calendar year")],
    handler: Annotated[
        GetCachedReportsHandler, Depends(get_get_cached_reports_handler)
    ],
) -> CachedReportsResponse | JSONResponse:
    """Return the cached report bundle of a period.

    GET /api/v1/reports/2024 → 200 OK

    Returns:
        CachedReportsResponse with the bundle as last synced.
        JSONResponse 404 (no_cached_data) if the period was never synced.
    """
    match await handler.handle(GetCachedReports(period=period)):
        case Success(value=entry):
            return CachedReportsResponse.from_entry(entry)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
