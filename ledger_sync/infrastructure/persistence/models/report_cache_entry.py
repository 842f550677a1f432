"""Report cache entry database model."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ledger_sync.infrastructure.persistence.base import BaseMutableModel


class ReportCacheEntry(BaseMutableModel):
    """Cached report bundle for one period (calendar year).

    All bundle columns are written by one INSERT or one conditional UPDATE.

    Fields:
        period: Calendar year (unique)
        last_sync_timestamp: Commit time of the bundle (UTC)
        daily_report, class_report, balance_sheet_report: Opaque JSON reports
        tracked_accounts: Owner -> {account_id, account_name} (nullable)
        auxiliary_ledger_data: Owner -> general ledger report (nullable)
        synced_by: User id of the trigger (NULL for scheduled runs)
        version: Optimistic-concurrency counter
    """

    __tablename__ = "report_cache_entries"

    period: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        unique=True,
        index=True,
        comment="Calendar year the reports cover",
    )

    last_sync_timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    daily_report: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)

    class_report: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)

    balance_sheet_report: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)

    tracked_accounts: Mapped[dict[str, Any] | None] = mapped_column(
        JSON,
        nullable=True,
        default=None,
    )

    auxiliary_ledger_data: Mapped[dict[str, Any] | None] = mapped_column(
        JSON,
        nullable=True,
        default=None,
    )

    synced_by: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="User who triggered the sync (NULL for scheduled runs)",
    )

    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
