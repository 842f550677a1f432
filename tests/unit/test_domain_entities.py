"""Unit tests for domain entities and value objects."""

from datetime import UTC, datetime

from ledger_sync.domain.entities.audit_log_entry import AuditLogEntry
from ledger_sync.domain.entities.cache_entry import CacheEntry
from ledger_sync.domain.entities.caller import Caller
from ledger_sync.domain.enums.audit_status import AuditStatus
from ledger_sync.domain.value_objects.report_bundle import TrackedAccount
from tests.utils.factories import NOW_TS, create_bundle, create_credential


class TestCredentialRecord:
    """Expiry arithmetic and token replacement."""

    def test_needs_refresh_boundary(self):
        record = create_credential(expires_at=NOW_TS + 300)

        assert record.needs_refresh(now=NOW_TS, threshold_seconds=300) is True
        assert record.needs_refresh(now=NOW_TS - 1, threshold_seconds=300) is False

    def test_with_tokens_bumps_version(self):
        record = create_credential(version=3)

        updated = record.with_tokens(
            access_token="a2", refresh_token="r2", expires_at=NOW_TS + 10
        )

        assert updated.version == 4
        assert (updated.access_token, updated.refresh_token) == ("a2", "r2")
        assert updated.environment == record.environment
        assert record.version == 3

    def test_repr_hides_tokens(self):
        record = create_credential(access_token="secret-access", refresh_token="secret-refresh")

        text = repr(record)

        assert "secret-access" not in text
        assert "secret-refresh" not in text
        assert "version=1" in text


class TestCacheEntry:
    def test_from_bundle_copies_every_field(self):
        bundle = create_bundle()
        synced_at = datetime(2024, 6, 10, 18, 0, tzinfo=UTC)

        entry = CacheEntry.from_bundle(
            period=2024, bundle=bundle, synced_at=synced_at, synced_by="user-1"
        )

        assert entry.last_sync_timestamp == synced_at
        assert entry.daily_report == bundle.daily_report
        assert entry.class_report == bundle.class_report
        assert entry.balance_sheet_report == bundle.balance_sheet_report
        assert entry.tracked_accounts == bundle.tracked_accounts
        assert entry.auxiliary_ledger_data == bundle.auxiliary_ledger_data
        assert entry.version == 1


class TestReportBundle:
    def test_tracked_account_count(self):
        assert create_bundle().tracked_account_count == 2
        assert create_bundle(with_tracked_accounts=False).tracked_account_count == 0

    def test_tracked_account_dict_round_trip(self):
        account = TrackedAccount(account_id="88", account_name="Equity:Dr Allen:X")

        assert TrackedAccount.from_dict(account.to_dict()) == account


class TestCallerAndAudit:
    def test_scheduled_caller(self):
        caller = Caller.scheduled()

        assert caller.id == "scheduler"
        assert caller.is_scheduled is True
        assert caller.is_admin is False

    def test_audit_entries_get_distinct_ids(self):
        first = AuditLogEntry(status=AuditStatus.SUCCESS, details={})
        second = AuditLogEntry(status=AuditStatus.SUCCESS, details={})

        assert first.id != second.id
        assert first.executed_at.tzinfo is not None
