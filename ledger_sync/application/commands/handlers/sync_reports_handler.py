"""SyncReports command handler.

Drives one sync invocation end to end:

    authorize -> gate -> refresh credential -> fetch bundle -> commit -> audit

Every step returns a Result; the first Failure stops the pipeline. The cache
upsert is the only state change a sync makes to the cache, and it is the
last one, so a failed invocation leaves the previous entry exactly as it was.

Architecture:
    - Application layer handler (orchestrates domain + ports)
    - Gate decision is a pure domain function
    - Audit entries are written for scheduled invocations only; audit
      failures are logged and never change the result
"""

import secrets
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, tzinfo
from typing import Any, cast

from ledger_sync.application.commands.sync_commands import SyncReports
from ledger_sync.application.dtos.sync_dtos import SyncOutcome
from ledger_sync.application.services.credential_store import CredentialStore
from ledger_sync.core.enums import ErrorCode
from ledger_sync.core.errors import AuthenticationError, DomainError, NotFoundError
from ledger_sync.core.result import Failure, Result, Success
from ledger_sync.domain.entities.audit_log_entry import AuditLogEntry
from ledger_sync.domain.entities.cache_entry import CacheEntry
from ledger_sync.domain.entities.caller import Caller
from ledger_sync.domain.enums.audit_status import AuditStatus
from ledger_sync.domain.enums.gate_reason import GateReason
from ledger_sync.domain.enums.qbo_environment import QboEnvironment
from ledger_sync.domain.errors import AlreadySyncedError, ReportFetchError
from ledger_sync.domain.protocols.audit_log_protocol import AuditLogProtocol
from ledger_sync.domain.protocols.cache_store_protocol import CacheStoreProtocol
from ledger_sync.domain.protocols.logger_protocol import LoggerProtocol
from ledger_sync.domain.protocols.report_fetcher_protocol import ReportFetcherProtocol
from ledger_sync.domain.services.sync_gate import decide
from ledger_sync.domain.value_objects.business_calendar import BusinessCalendar


@dataclass(frozen=True, kw_only=True)
class SyncPolicy:
    """Gate settings for the handler.

    Attributes:
        interactive_calendar: Calendar for user-triggered syncs.
        scheduled_calendar: Calendar for scheduled syncs.
        cutoff_hour: Local hour at which a day's data is settled.
        tz: Timezone the cutoff is evaluated in.
        environment: Which stored credential to use.
    """

    interactive_calendar: BusinessCalendar
    scheduled_calendar: BusinessCalendar
    cutoff_hour: int
    tz: tzinfo
    environment: QboEnvironment


def _utc_now() -> datetime:
    return datetime.now(UTC)


class SyncReportsHandler:
    """Handler for SyncReports command.

    Dependencies (injected via constructor):
        - CredentialStore: credential load and refresh
        - ReportFetcherProtocol: remote report bundle
        - CacheStoreProtocol: per-period cache
        - AuditLogProtocol: scheduled-run audit trail
        - LoggerProtocol: structured logging
    """

    def __init__(
        self,
        *,
        credential_store: CredentialStore,
        report_fetcher: ReportFetcherProtocol,
        cache_store: CacheStoreProtocol,
        audit_log: AuditLogProtocol,
        logger: LoggerProtocol,
        policy: SyncPolicy,
        cron_secret: str | None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            credential_store: Credential load/refresh service.
            report_fetcher: Remote report fetcher.
            cache_store: Report cache.
            audit_log: Audit log for scheduled runs.
            logger: Structured logger.
            policy: Calendars, cutoff and timezone for the gate.
            cron_secret: Secret identifying scheduled invocations (None
                disables scheduled access).
            clock: Returns the current time (UTC).
        """
        self._credential_store = credential_store
        self._report_fetcher = report_fetcher
        self._cache_store = cache_store
        self._audit_log = audit_log
        self._logger = logger
        self._policy = policy
        self._cron_secret = cron_secret
        self._clock = clock

    async def handle(self, cmd: SyncReports) -> Result[SyncOutcome, DomainError]:
        """Handle SyncReports command.

        Args:
            cmd: SyncReports command.

        Returns:
            Success(SyncOutcome): New entry committed.
            Failure(AuthenticationError): No valid caller.
            Failure(AlreadySyncedError): Gate refused; nothing was touched.
            Failure(DomainError): Credential, fetch or storage failure.
        """
        caller = self._authorize(cmd)
        if caller is None:
            self._logger.warning("sync_unauthorized", period=cmd.period)
            return cast(
                Result[SyncOutcome, DomainError],
                Failure(
                    error=AuthenticationError(
                        code=ErrorCode.UNAUTHORIZED,
                        message="Authentication required",
                    )
                ),
            )

        started = time.perf_counter()
        details: dict[str, Any] = {"period": cmd.period}
        log = self._logger.bind(period=cmd.period, caller_id=caller.id)

        result = await self._run(cmd, caller, log, details)

        details["execution_time_ms"] = round((time.perf_counter() - started) * 1000, 2)
        match result:
            case Success(value=outcome):
                log.info(
                    "sync_committed",
                    range_end=outcome.range_end.isoformat(),
                    tracked_account_count=outcome.tracked_account_count,
                )
            case Failure(error=AlreadySyncedError() as skipped):
                log.info("sync_skipped", reason=skipped.reason.value)
            case Failure(error=error):
                log.error("sync_failed", error_code=error.code.value, error_message=error.message)

        if caller.is_scheduled:
            await self._audit(result, details)
        return result

    def _authorize(self, cmd: SyncReports) -> Caller | None:
        """Resolve the effective caller.

        The cron secret wins over a user token; a wrong secret falls back to
        the user caller.
        """
        if (
            self._cron_secret
            and cmd.presented_secret is not None
            and secrets.compare_digest(
                cmd.presented_secret.encode("utf-8"), self._cron_secret.encode("utf-8")
            )
        ):
            return Caller.scheduled()
        return cmd.caller

    async def _run(
        self,
        cmd: SyncReports,
        caller: Caller,
        log: LoggerProtocol,
        details: dict[str, Any],
    ) -> Result[SyncOutcome, DomainError]:
        """Gate, refresh, fetch and commit."""
        now = self._clock()

        # Step 1: Read current entry (missing is fine)
        existing: CacheEntry | None = None
        read_result = await self._cache_store.read(cmd.period)
        match read_result:
            case Success(value=entry):
                existing = entry
            case Failure(error=NotFoundError()):
                existing = None
            case Failure(error=error):
                return cast(Result[SyncOutcome, DomainError], Failure(error=error))

        # Step 2: Gate
        last_sync = existing.last_sync_timestamp if existing else None
        privileged = caller.is_admin or (caller.is_scheduled and cmd.force)
        calendar = (
            self._policy.scheduled_calendar
            if caller.is_scheduled
            else self._policy.interactive_calendar
        )
        decision = decide(
            last_sync,
            now,
            privileged,
            period=cmd.period,
            calendar=calendar,
            cutoff_hour=self._policy.cutoff_hour,
            tz=self._policy.tz,
        )
        details.update(
            range_start=decision.range_start.isoformat(),
            range_end=decision.range_end.isoformat(),
            gate_reason=decision.reason.value,
            bypassed=decision.bypassed,
        )

        if not decision.allowed:
            return cast(
                Result[SyncOutcome, DomainError],
                Failure(
                    error=AlreadySyncedError(
                        code=ErrorCode.ALREADY_SYNCED,
                        message=_SKIP_MESSAGES.get(decision.reason, "Sync not allowed"),
                        period=cmd.period,
                        reason=decision.reason,
                        last_sync_timestamp=last_sync,
                        settlement_day=decision.current_settlement_day,
                    )
                ),
            )

        if decision.bypassed:
            log.warning(
                "sync_gate_bypassed",
                is_admin=caller.is_admin,
                is_scheduled=caller.is_scheduled,
                last_settlement_day=(
                    decision.last_settlement_day.isoformat()
                    if decision.last_settlement_day
                    else None
                ),
                current_settlement_day=(
                    decision.current_settlement_day.isoformat()
                    if decision.current_settlement_day
                    else None
                ),
            )

        # Step 3: Credential
        load_result = await self._credential_store.load(self._policy.environment)
        if isinstance(load_result, Failure):
            return cast(Result[SyncOutcome, DomainError], load_result)

        credential_result = await self._credential_store.ensure_valid(load_result.value)
        if isinstance(credential_result, Failure):
            return credential_result

        # Step 4: Fetch the whole bundle (fail-fast)
        fetch_result = await self._report_fetcher.fetch_all(
            credential_result.value, decision.range_start, decision.range_end
        )
        if isinstance(fetch_result, Failure):
            details["failed_step"] = fetch_result.error.step.value
            return cast(Result[SyncOutcome, DomainError], fetch_result)

        bundle = fetch_result.value
        synced_by = None if caller.is_scheduled else caller.id

        # Step 5: Commit in one conditional write
        new_entry = CacheEntry.from_bundle(
            period=cmd.period,
            bundle=bundle,
            synced_at=now,
            synced_by=synced_by,
        )
        upsert_result = await self._cache_store.upsert(
            new_entry,
            expected_version=existing.version if existing else None,
        )
        if isinstance(upsert_result, Failure):
            return cast(Result[SyncOutcome, DomainError], upsert_result)

        stored = upsert_result.value
        details["tracked_account_count"] = bundle.tracked_account_count
        return Success(
            value=SyncOutcome(
                period=cmd.period,
                last_sync_timestamp=stored.last_sync_timestamp,
                range_start=decision.range_start,
                range_end=decision.range_end,
                gate_reason=decision.reason,
                bypassed=decision.bypassed,
                tracked_account_count=bundle.tracked_account_count,
                synced_by=synced_by,
            )
        )

    async def _audit(
        self,
        result: Result[SyncOutcome, DomainError],
        details: dict[str, Any],
    ) -> None:
        """Append the audit entry for a scheduled invocation."""
        match result:
            case Success():
                status = AuditStatus.SUCCESS
            case Failure(error=AlreadySyncedError() as skipped):
                status = AuditStatus.SKIPPED
                details["message"] = skipped.message
                if skipped.last_sync_timestamp is not None:
                    details["last_sync_timestamp"] = skipped.last_sync_timestamp.isoformat()
            case Failure(error=error):
                status = AuditStatus.ERROR
                details["error"] = error.code.value
                details["message"] = error.message
                if isinstance(error, ReportFetchError) and error.status_code is not None:
                    details["status_code"] = error.status_code

        audit_result = await self._audit_log.append(
            AuditLogEntry(status=status, details=details)
        )
        if isinstance(audit_result, Failure):
            self._logger.error(
                "sync_audit_failed",
                status=status.value,
                error_message=audit_result.error.message,
            )


_SKIP_MESSAGES: dict[GateReason, str] = {
    GateReason.ALREADY_SYNCED: "Data is already up to date for the current settlement day",
    GateReason.NON_BUSINESS_DAY: "Syncs only run on business days",
    GateReason.PERIOD_NOT_STARTED: "The period has no settled data yet",
}
