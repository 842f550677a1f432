"""Cached report bundle for one period."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ledger_sync.domain.value_objects.report_bundle import ReportBundle, TrackedAccount


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheEntry:
    """Last successful sync of a period (calendar year).

    Every bundle field is written in one statement, so readers never observe
    a mix of two syncs.

    Attributes:
        period: Calendar year the reports cover.
        last_sync_timestamp: When the bundle was committed (UTC).
        daily_report: Profit and loss summarized by day.
        class_report: Profit and loss summarized by class.
        balance_sheet_report: Balance sheet for the range.
        tracked_accounts: Owner name -> tracked equity sub-account.
        auxiliary_ledger_data: Owner name -> general ledger report.
        synced_by: User who triggered the sync (None for scheduled runs).
        version: Optimistic-concurrency counter.
    """

    period: int
    last_sync_timestamp: datetime
    daily_report: dict[str, Any]
    class_report: dict[str, Any]
    balance_sheet_report: dict[str, Any]
    tracked_accounts: dict[str, TrackedAccount] | None = None
    auxiliary_ledger_data: dict[str, dict[str, Any]] | None = None
    synced_by: str | None = None
    version: int = 1

    @classmethod
    def from_bundle(
        cls,
        *,
        period: int,
        bundle: ReportBundle,
        synced_at: datetime,
        synced_by: str | None,
        version: int = 1,
    ) -> "CacheEntry":
        """Build an entry from a freshly fetched bundle."""
        return cls(
            period=period,
            last_sync_timestamp=synced_at,
            daily_report=bundle.daily_report,
            class_report=bundle.class_report,
            balance_sheet_report=bundle.balance_sheet_report,
            tracked_accounts=bundle.tracked_accounts,
            auxiliary_ledger_data=bundle.auxiliary_ledger_data,
            synced_by=synced_by,
            version=version,
        )
