"""Sync gate.

Pure decision function: given when a period was last synced and the current
time, decide whether the remote service may be asked for fresh reports. The
remote reporting cadence is one settled day per business day, so a sync is
due only once a later settlement day exists.

Rules:
    - Never synced: allowed (``first_sync``).
    - ``settlement(last) < settlement(now)``: allowed (``new_settlement_day``).
    - Otherwise refused (``already_synced``).
    - Both settlement days are capped at Dec 31 of the period, so a past
      year is closed once a sync after its year end has run.
    - Request made on a non-business day: refused (``non_business_day``)
      regardless of the last sync.
    - A privileged caller turns any of these refusals into an allowed
      decision with ``bypassed=True`` (``privileged_override``).
    - A period with no settled day yet (future year, or Jan 1 before the
      cutoff) is refused for everyone (``period_not_started``).

Monotonicity holds across business days: for a fixed last sync, once the
gate allows at time t it allows at every later business-day time.
"""

from datetime import UTC, date, datetime, tzinfo

from ledger_sync.core.constants import DATA_CUTOFF_HOUR_DEFAULT
from ledger_sync.domain.enums.gate_reason import GateReason
from ledger_sync.domain.value_objects.business_calendar import BusinessCalendar
from ledger_sync.domain.value_objects.gate_decision import GateDecision


def decide(
    last_sync_timestamp: datetime | None,
    now: datetime,
    caller_is_privileged: bool,
    *,
    period: int,
    calendar: BusinessCalendar,
    cutoff_hour: int = DATA_CUTOFF_HOUR_DEFAULT,
    tz: tzinfo = UTC,
) -> GateDecision:
    """Decide whether a sync of ``period`` may run at ``now``.

    Args:
        last_sync_timestamp: Last successful sync of the period (None if never).
        now: Request time.
        caller_is_privileged: Whether the caller may bypass a refusal.
        period: Calendar year being synced.
        calendar: Business calendar for the caller kind.
        cutoff_hour: Local hour at which a day's data is settled.
        tz: Timezone the cutoff and business days are evaluated in.

    Returns:
        GateDecision: Decision with the date range to request.

    Example:
        >>> decision = decide(
        ...     datetime(2024, 6, 10, 16, 30, tzinfo=UTC),
        ...     datetime(2024, 6, 10, 18, 0, tzinfo=UTC),
        ...     False,
        ...     period=2024,
        ...     calendar=BusinessCalendar.weekdays(),
        ... )
        >>> decision.allowed, decision.range_end
        (True, datetime.date(2024, 6, 10))
    """
    current_settlement = calendar.settlement_day(now, cutoff_hour=cutoff_hour, tz=tz)
    last_settlement = (
        calendar.settlement_day(last_sync_timestamp, cutoff_hour=cutoff_hour, tz=tz)
        if last_sync_timestamp is not None
        else None
    )
    range_start = date(period, 1, 1)
    period_end = date(period, 12, 31)
    range_end = min(current_settlement, period_end)

    def _decision(allowed: bool, reason: GateReason, bypassed: bool = False) -> GateDecision:
        return GateDecision(
            allowed=allowed,
            reason=reason,
            range_start=range_start,
            range_end=range_end,
            bypassed=bypassed,
            current_settlement_day=current_settlement,
            last_settlement_day=last_settlement,
        )

    if range_end < range_start:
        return _decision(False, GateReason.PERIOD_NOT_STARTED)

    refusal: GateReason | None = None
    if not calendar.is_business_day(calendar.local_date(now, tz)):
        refusal = GateReason.NON_BUSINESS_DAY
    elif last_settlement is not None and min(last_settlement, period_end) >= min(
        current_settlement, period_end
    ):
        refusal = GateReason.ALREADY_SYNCED

    if refusal is None:
        if last_settlement is None:
            return _decision(True, GateReason.FIRST_SYNC)
        return _decision(True, GateReason.NEW_SETTLEMENT_DAY)

    if caller_is_privileged:
        return _decision(True, GateReason.PRIVILEGED_OVERRIDE, bypassed=True)
    return _decision(False, refusal)
