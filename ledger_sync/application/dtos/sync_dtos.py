"""Sync DTOs.

Result dataclasses carried from the sync handler back to the presentation
layer.
"""

from dataclasses import dataclass
from datetime import date, datetime

from ledger_sync.domain.enums.gate_reason import GateReason


@dataclass
class SyncOutcome:
    """Result of a committed sync.

    Attributes:
        period: Calendar year that was synced.
        last_sync_timestamp: Commit timestamp of the new cache entry.
        range_start: First day requested.
        range_end: Last day requested.
        gate_reason: Why the gate allowed the sync.
        bypassed: True when a privileged caller overrode a refusal.
        tracked_account_count: Number of sub-ledgers fetched.
        synced_by: User who triggered the sync (None for scheduled runs).
    """

    period: int
    last_sync_timestamp: datetime
    range_start: date
    range_end: date
    gate_reason: GateReason
    bypassed: bool
    tracked_account_count: int
    synced_by: str | None = None
