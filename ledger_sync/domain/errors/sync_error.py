"""Gate refusal.

AlreadySynced is part of the error taxonomy so it can short-circuit the
pipeline like any Failure, but it is not a fault: clients receive it with a
non-error HTTP status and scheduled runs audit it as ``skipped``.
"""

from dataclasses import dataclass
from datetime import date, datetime

from ledger_sync.core.errors import DomainError
from ledger_sync.domain.enums.gate_reason import GateReason


@dataclass(frozen=True, slots=True, kw_only=True)
class AlreadySyncedError(DomainError):
    """Gate refused the sync.

    Attributes:
        period: Period that was requested.
        reason: Gate reason for the refusal.
        last_sync_timestamp: Timestamp of the last successful sync, if any.
        settlement_day: Settlement day implied by the request time.
    """

    period: int
    reason: GateReason
    last_sync_timestamp: datetime | None = None
    settlement_day: date | None = None
