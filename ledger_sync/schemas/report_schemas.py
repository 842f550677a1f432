"""Cached report response schemas."""

from datetime import datetime
from typing import Any

from ledger_sync.domain.entities.cache_entry import CacheEntry
from ledger_sync.schemas.common_schemas import CamelModel


class TrackedAccountSchema(CamelModel):
    """Tracked equity sub-account."""

    account_id: str
    account_name: str


class CachedReportsResponse(CamelModel):
    """Cached bundle of one period. Report bodies are passed through as is."""

    period: int
    last_sync_timestamp: datetime
    daily_report: dict[str, Any]
    class_report: dict[str, Any]
    balance_sheet_report: dict[str, Any]
    tracked_accounts: dict[str, TrackedAccountSchema] | None = None
    auxiliary_ledger_data: dict[str, dict[str, Any]] | None = None
    synced_by: str | None = None

    @classmethod
    def from_entry(cls, entry: CacheEntry) -> "CachedReportsResponse":
        """Convert CacheEntry to response schema."""
        return cls(
            period=entry.period,
            last_sync_timestamp=entry.last_sync_timestamp,
            daily_report=entry.daily_report,
            class_report=entry.class_report,
            balance_sheet_report=entry.balance_sheet_report,
            tracked_accounts=(
                {
                    owner: TrackedAccountSchema(
                        account_id=account.account_id,
                        account_name=account.account_name,
                    )
                    for owner, account in entry.tracked_accounts.items()
                }
                if entry.tracked_accounts is not None
                else None
            ),
            auxiliary_ledger_data=entry.auxiliary_ledger_data,
            synced_by=entry.synced_by,
        )
