"""API v1 routers.

Resources:
    /api/v1/syncs               - Run a sync of one period
    /api/v1/syncs/prior-year    - Run a sync of the previous calendar year
    /api/v1/reports/{period}    - Read the cached report bundle

The prefix is applied by the application factory from settings.
"""

from fastapi import APIRouter

from ledger_sync.presentation.routers.api.v1.reports import reports_router
from ledger_sync.presentation.routers.api.v1.syncs import syncs_router

v1_router = APIRouter()
v1_router.include_router(syncs_router)
v1_router.include_router(reports_router)

__all__ = [
    "v1_router",
]
