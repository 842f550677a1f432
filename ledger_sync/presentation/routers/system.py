"""System router for non-versioned application endpoints.

Lightweight, side-effect free endpoints for load balancers and basic
diagnostics.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ledger_sync.core.config import get_settings
from ledger_sync.core.container import get_database
from ledger_sync.infrastructure.persistence.database import Database

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Application name, status and version.
    """
    settings = get_settings()
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health(
    database: Annotated[Database, Depends(get_database)],
) -> JSONResponse:
    """Health check endpoint for monitoring and load balancers.

    Returns 503 when the database cannot be reached.
    """
    if await database.check_connection():
        return JSONResponse(content={"status": "healthy", "database": "ok"})
    return JSONResponse(
        status_code=503,
        content={"status": "unhealthy", "database": "unreachable"},
    )
