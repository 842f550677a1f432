"""Business calendar value object.

Decides which days count as business days and maps a timestamp to its
settlement day: the most recent day whose data is final.

Two calendars are in use and deliberately kept apart:
    - ``BusinessCalendar.weekdays()``: Monday to Friday (interactive syncs).
    - ``BusinessCalendar.with_holidays(...)``: weekdays minus a fixed holiday
      list (scheduled syncs).

Usage:
    from zoneinfo import ZoneInfo

    calendar = BusinessCalendar.with_holidays(settings.sync_holidays)
    day = calendar.settlement_day(now, cutoff_hour=17, tz=ZoneInfo("UTC"))
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, timedelta, tzinfo

SATURDAY = 5


@dataclass(frozen=True, slots=True, kw_only=True)
class BusinessCalendar:
    """Business day rules.

    Attributes:
        holidays: Dates that are never business days.
    """

    holidays: frozenset[date] = field(default_factory=frozenset)

    @classmethod
    def weekdays(cls) -> "BusinessCalendar":
        """Monday to Friday, no holidays."""
        return cls()

    @classmethod
    def with_holidays(cls, holidays: Iterable[date]) -> "BusinessCalendar":
        """Monday to Friday excluding the given holidays."""
        return cls(holidays=frozenset(holidays))

    def is_business_day(self, day: date) -> bool:
        """Check if a date is a business day."""
        return day.weekday() < SATURDAY and day not in self.holidays

    def previous_business_day(self, day: date) -> date:
        """Most recent business day strictly before ``day``."""
        candidate = day - timedelta(days=1)
        while not self.is_business_day(candidate):
            candidate -= timedelta(days=1)
        return candidate

    def local_date(self, moment: datetime, tz: tzinfo) -> date:
        """Calendar date of ``moment`` in ``tz`` (naive values are UTC)."""
        return _to_local(moment, tz).date()

    def settlement_day(
        self,
        moment: datetime,
        *,
        cutoff_hour: int,
        tz: tzinfo,
    ) -> date:
        """Settlement day of a timestamp.

        On a business day at or after the cutoff hour the settlement day is
        that day. Before the cutoff, or on any non-business day, it is the
        previous business day.

        Args:
            moment: Timestamp to evaluate.
            cutoff_hour: Local hour at which the day's data is settled.
            tz: Timezone the cutoff is evaluated in.

        Returns:
            date: The settlement day.

        Example:
            >>> cal = BusinessCalendar.weekdays()
            >>> cal.settlement_day(datetime(2024, 6, 10, 16, 30, tzinfo=UTC), cutoff_hour=17, tz=UTC)
            datetime.date(2024, 6, 7)
        """
        local = _to_local(moment, tz)
        day = local.date()
        if self.is_business_day(day) and local.hour >= cutoff_hour:
            return day
        return self.previous_business_day(day)


def _to_local(moment: datetime, tz: tzinfo) -> datetime:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(tz)
