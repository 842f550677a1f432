"""Sync endpoint response schemas."""

from datetime import date, datetime
from typing import Literal

from pydantic import Field

from ledger_sync.application.dtos.sync_dtos import SyncOutcome
from ledger_sync.domain.errors import AlreadySyncedError
from ledger_sync.schemas.common_schemas import CamelModel


class SyncResponse(CamelModel):
    """Committed sync.

    Example:
        {
            "success": true,
            "period": 2024,
            "lastSyncTimestamp": "2024-06-10T18:00:00Z",
            "rangeStart": "2024-01-01",
            "rangeEnd": "2024-06-10",
            "gateReason": "new_settlement_day",
            "bypassed": false,
            "trackedAccountCount": 3,
            "message": "Successfully synced all 2024 data"
        }
    """

    success: Literal[True] = True
    period: int
    last_sync_timestamp: datetime
    range_start: date
    range_end: date
    gate_reason: str
    bypassed: bool
    tracked_account_count: int
    message: str

    @classmethod
    def from_outcome(cls, outcome: SyncOutcome) -> "SyncResponse":
        """Convert SyncOutcome DTO to response schema."""
        return cls(
            period=outcome.period,
            last_sync_timestamp=outcome.last_sync_timestamp,
            range_start=outcome.range_start,
            range_end=outcome.range_end,
            gate_reason=outcome.gate_reason.value,
            bypassed=outcome.bypassed,
            tracked_account_count=outcome.tracked_account_count,
            message=f"Successfully synced all {outcome.period} data",
        )


class AlreadySyncedResponse(CamelModel):
    """Sync refused by the gate. Not an error for the client."""

    success: Literal[True] = True
    error: Literal["already_synced"] = "already_synced"
    message: str
    period: int
    reason: str = Field(..., description="Gate reason for the refusal")
    last_sync_timestamp: datetime | None = None

    @classmethod
    def from_error(cls, error: AlreadySyncedError) -> "AlreadySyncedResponse":
        """Convert the gate refusal to response schema."""
        return cls(
            message=error.message,
            period=error.period,
            reason=error.reason.value,
            last_sync_timestamp=error.last_sync_timestamp,
        )
