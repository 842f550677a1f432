"""Why the sync gate allowed or refused a sync."""

from enum import Enum


class GateReason(str, Enum):
    """Reason attached to every gate decision.

    Allowing reasons:
        FIRST_SYNC: Period has never been synced.
        NEW_SETTLEMENT_DAY: A later settlement day is available.
        PRIVILEGED_OVERRIDE: Privileged caller bypassed a refusal.

    Refusing reasons:
        ALREADY_SYNCED: Last sync already covers the current settlement day.
        NON_BUSINESS_DAY: Request made on a weekend/holiday.
        PERIOD_NOT_STARTED: Period has no settled day yet (not bypassable).
    """

    FIRST_SYNC = "first_sync"
    NEW_SETTLEMENT_DAY = "new_settlement_day"
    PRIVILEGED_OVERRIDE = "privileged_override"
    ALREADY_SYNCED = "already_synced"
    NON_BUSINESS_DAY = "non_business_day"
    PERIOD_NOT_STARTED = "period_not_started"
