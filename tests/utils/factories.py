"""Builders for domain objects used across test modules."""

from datetime import UTC, datetime
from typing import Any

from ledger_sync.domain.entities.cache_entry import CacheEntry
from ledger_sync.domain.entities.credential_record import CredentialRecord
from ledger_sync.domain.enums.qbo_environment import QboEnvironment
from ledger_sync.domain.value_objects.report_bundle import ReportBundle, TrackedAccount

NOW_TS = 1_718_042_400  # 2024-06-10 18:00:00 UTC


def create_credential(
    *,
    environment: QboEnvironment = QboEnvironment.PRODUCTION,
    account_id: str = "9130347",
    access_token: str = "access-old",
    refresh_token: str = "refresh-old",
    expires_at: int = NOW_TS + 3600,
    version: int = 1,
) -> CredentialRecord:
    """Create a credential record (valid for an hour by default)."""
    return CredentialRecord(
        environment=environment,
        account_id=account_id,
        access_token=access_token,
        refresh_token=refresh_token,
        expires_at=expires_at,
        version=version,
    )


def report(name: str) -> dict[str, Any]:
    """Minimal report body; the engine never looks inside."""
    return {"Header": {"ReportName": name}, "Rows": {"Row": []}}


def create_bundle(*, with_tracked_accounts: bool = True) -> ReportBundle:
    """Create a report bundle, optionally with two tracked sub-accounts."""
    if not with_tracked_accounts:
        return ReportBundle(
            daily_report=report("ProfitAndLoss"),
            class_report=report("ProfitAndLoss"),
            balance_sheet_report=report("BalanceSheet"),
        )
    return ReportBundle(
        daily_report=report("ProfitAndLoss"),
        class_report=report("ProfitAndLoss"),
        balance_sheet_report=report("BalanceSheet"),
        tracked_accounts={
            "Allen": TrackedAccount(
                account_id="88",
                account_name="Equity:Dr Allen:3920 Retirement Contributions",
            ),
            "Baker": TrackedAccount(
                account_id="91",
                account_name="Equity:Retirement Contributions - Baker",
            ),
        },
        auxiliary_ledger_data={
            "Allen": report("GeneralLedger"),
            "Baker": report("GeneralLedger"),
        },
    )


def create_cache_entry(
    *,
    period: int = 2024,
    last_sync_timestamp: datetime = datetime(2024, 6, 10, 17, 30, tzinfo=UTC),
    synced_by: str | None = "user-1",
    version: int = 1,
    with_tracked_accounts: bool = True,
) -> CacheEntry:
    """Create a cache entry holding a complete bundle."""
    return CacheEntry.from_bundle(
        period=period,
        bundle=create_bundle(with_tracked_accounts=with_tracked_accounts),
        synced_at=last_sync_timestamp,
        synced_by=synced_by,
        version=version,
    )
