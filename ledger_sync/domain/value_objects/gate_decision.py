"""Outcome of the sync gate."""

from dataclasses import dataclass
from datetime import date

from ledger_sync.domain.enums.gate_reason import GateReason


@dataclass(frozen=True, slots=True, kw_only=True)
class GateDecision:
    """Whether a sync may run, and for which date range.

    Attributes:
        allowed: True if the sync may proceed.
        reason: Why the gate decided as it did.
        range_start: First day to request (Jan 1 of the period).
        range_end: Last settled day to request.
        bypassed: True when a privileged caller overrode a refusal.
        current_settlement_day: Settlement day of the request time.
        last_settlement_day: Settlement day of the last sync (None if never synced).
    """

    allowed: bool
    reason: GateReason
    range_start: date
    range_end: date
    bypassed: bool = False
    current_settlement_day: date | None = None
    last_settlement_day: date | None = None
