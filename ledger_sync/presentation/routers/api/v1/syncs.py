"""Sync resource handlers.

Handlers:
    trigger_sync            - POST /syncs (dashboard users, scheduler)
    trigger_scheduled_sync  - GET /syncs (scheduler only)
    trigger_prior_year_sync - POST|GET /syncs/prior-year

The Bearer token is either the cron secret or a user JWT. Only the POST
routes consider the JWT caller; GET requests are honoured for the
scheduler alone, so a user JWT sent with GET is unauthorized.
"""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ledger_sync.application.commands.handlers.sync_reports_handler import (
    SyncReportsHandler,
)
from ledger_sync.application.commands.sync_commands import SyncReports
from ledger_sync.core.config import get_settings
from ledger_sync.core.container import get_sync_reports_handler
from ledger_sync.core.result import Failure, Success
from ledger_sync.domain.entities.caller import Caller
from ledger_sync.domain.errors import AlreadySyncedError
from ledger_sync.presentation.routers.api.middleware import (
    OptionalCaller,
    PresentedToken,
)
from ledger_sync.presentation.routers.api.v1.errors import ErrorResponseBuilder
from ledger_sync.schemas.sync_schemas import AlreadySyncedResponse, SyncResponse

syncs_router = APIRouter(prefix="/syncs", tags=["Syncs"])

PeriodQuery = Annotated[
    int | None,
    Query(ge=2000, le=2100, description="Calendar year to sync (default: current year)"),
]
ForceQuery = Annotated[
    bool,
    Query(description="Scheduler only: bypass the sync gate"),
]


def _current_year() -> int:
    settings = get_settings()
    return datetime.now(settings.sync_tz).year


async def _run_sync(
    handler: SyncReportsHandler,
    *,
    period: int,
    caller: Caller | None,
    token: str | None,
    force: bool,
) -> SyncResponse | AlreadySyncedResponse | JSONResponse:
    """Dispatch the command and map its Result to a response."""
    result = await handler.handle(
        SyncReports(
            period=period,
            caller=caller,
            presented_secret=token,
            force=force,
        )
    )

    match result:
        case Success(value=outcome):
            return SyncResponse.from_outcome(outcome)
        case Failure(error=AlreadySyncedError() as error):
            return AlreadySyncedResponse.from_error(error)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@syncs_router.post("", response_model=None)
async def trigger_sync(
    token: PresentedToken,
    caller: OptionalCaller,
    handler: Annotated[SyncReportsHandler, Depends(get_sync_reports_handler)],
    period: PeriodQuery = None,
    force: ForceQuery = False,
) -> SyncResponse | AlreadySyncedResponse | JSONResponse:
    """Sync one period's report bundle into the cache.

    POST /api/v1/syncs?period=2024 → 200 OK

    Returns:
        SyncResponse when a new bundle was committed.
        AlreadySyncedResponse (200) when the gate refused the sync.
        JSONResponse with error body on failure.
    """
    return await _run_sync(
        handler,
        period=period if period is not None else _current_year(),
        caller=caller,
        token=token,
        force=force,
    )


@syncs_router.get("", response_model=None)
async def trigger_scheduled_sync(
    token: PresentedToken,
    handler: Annotated[SyncReportsHandler, Depends(get_sync_reports_handler)],
    period: PeriodQuery = None,
    force: ForceQuery = False,
) -> SyncResponse | AlreadySyncedResponse | JSONResponse:
    """Scheduled sync entry point (cron runners issue GET requests).

    GET /api/v1/syncs?period=2024 → 200 OK
    """
    return await _run_sync(
        handler,
        period=period if period is not None else _current_year(),
        caller=None,
        token=token,
        force=force,
    )


@syncs_router.post("/prior-year", response_model=None)
async def trigger_prior_year_sync(
    token: PresentedToken,
    caller: OptionalCaller,
    handler: Annotated[SyncReportsHandler, Depends(get_sync_reports_handler)],
    force: ForceQuery = False,
) -> SyncResponse | AlreadySyncedResponse | JSONResponse:
    """Sync the previous calendar year.

    Once the year is over the gate clamps the range to December 31, and the
    first sync after year end closes the period.
    """
    return await _run_sync(
        handler,
        period=_current_year() - 1,
        caller=caller,
        token=token,
        force=force,
    )


@syncs_router.get("/prior-year", response_model=None)
async def trigger_scheduled_prior_year_sync(
    token: PresentedToken,
    handler: Annotated[SyncReportsHandler, Depends(get_sync_reports_handler)],
    force: ForceQuery = False,
) -> SyncResponse | AlreadySyncedResponse | JSONResponse:
    """Scheduled prior-year sync (scheduler only)."""
    return await _run_sync(
        handler,
        period=_current_year() - 1,
        caller=None,
        token=token,
        force=force,
    )
