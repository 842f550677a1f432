"""Pydantic request/response schemas for the HTTP API.

JSON keys are camelCase (``lastSyncTimestamp``) to match the dashboard
client.
"""

from ledger_sync.schemas.common_schemas import ErrorResponse
from ledger_sync.schemas.report_schemas import CachedReportsResponse
from ledger_sync.schemas.sync_schemas import AlreadySyncedResponse, SyncResponse

__all__ = [
    "AlreadySyncedResponse",
    "CachedReportsResponse",
    "ErrorResponse",
    "SyncResponse",
]
