"""QuickBooks report bundle fetcher.

Fetches, strictly one after another:

1. ProfitAndLoss summarized by day
2. ProfitAndLoss summarized by class
3. BalanceSheet (cash basis)
4. When sub-account tracking is on: the equity account list, then one
   GeneralLedger report per tracked sub-account

The first failing call aborts the bundle; nothing fetched so far is
returned. Report bodies are passed through untouched. Only the account
query is interpreted, to find which sub-ledgers to fetch.
"""

import re
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

import structlog

from ledger_sync.core.constants import (
    PROVIDER_TIMEOUT_DEFAULT,
    SUB_ACCOUNT_DISCOVERY_QUERY,
    SUB_LEDGER_COLUMNS,
)
from ledger_sync.core.enums import ErrorCode
from ledger_sync.core.result import Failure, Result, Success
from ledger_sync.domain.entities.credential_record import CredentialRecord
from ledger_sync.domain.enums.fetch_step import FetchStep
from ledger_sync.domain.enums.qbo_environment import QboEnvironment
from ledger_sync.domain.errors import ReportFetchError
from ledger_sync.domain.value_objects.report_bundle import ReportBundle, TrackedAccount
from ledger_sync.infrastructure.providers.quickbooks.api.reports_api import (
    QuickBooksReportsAPI,
)

logger = structlog.get_logger(__name__)

_PARENT_OWNER = re.compile(r":Dr\.?\s+(\w+)", re.IGNORECASE)


def account_list(query_response: Mapping[str, Any]) -> list[Any] | None:
    """Return the ``Account`` array of an account query response.

    Absent or null keys mean no accounts. A ``QueryResponse`` that is not an
    object, or an ``Account`` that is not an array, returns None.
    """
    query = query_response.get("QueryResponse")
    if query is None:
        return []
    if not isinstance(query, dict):
        return None
    accounts = query.get("Account")
    if accounts is None:
        return []
    if not isinstance(accounts, list):
        return None
    return accounts


def extract_tracked_accounts(
    query_response: dict[str, Any],
    *,
    name_pattern: str,
    owners: Iterable[str] = (),
) -> dict[str, TrackedAccount]:
    """Pick tracked sub-accounts out of an account query response.

    An account is tracked when the last segment of its fully qualified name
    matches ``name_pattern`` (case-insensitive) and an owner can be found:
    first from a ``Dr NAME`` / ``Dr. NAME`` parent segment, otherwise from a
    ``<pattern> - NAME`` suffix. With a non-empty ``owners`` list, only
    those owners are kept.

    Args:
        query_response: Raw ``{"QueryResponse": {"Account": [...]}}`` body.
            Entries that are not objects or lack a string name are skipped.
        name_pattern: Regex for the account's own name.
        owners: Owner allow-list (empty keeps every owner found).

    Returns:
        dict: Owner -> TrackedAccount. A later account for the same owner
        replaces an earlier one.

    Example:
        >>> extract_tracked_accounts(
        ...     {"QueryResponse": {"Account": [
        ...         {"Id": "88", "FullyQualifiedName": "Equity:Dr Allen:3920 Retirement Contributions"},
        ...     ]}},
        ...     name_pattern="Retirement Contribution",
        ... )
        {'Allen': TrackedAccount(account_id='88', account_name='Equity:Dr Allen:3920 Retirement Contributions')}
    """
    allowed = set(owners)
    name_re = re.compile(name_pattern, re.IGNORECASE)
    suffix_re = re.compile(rf"(?:{name_pattern})s?\s*-\s*(.+)$", re.IGNORECASE)

    accounts = account_list(query_response) or []
    tracked: dict[str, TrackedAccount] = {}

    for account in accounts:
        if not isinstance(account, dict):
            continue
        fqn = account.get("FullyQualifiedName")
        account_id = account.get("Id")
        if not isinstance(fqn, str) or not fqn or account_id is None:
            continue

        leaf = fqn.split(":")[-1]
        if not name_re.search(leaf):
            continue

        owner: str | None = None
        if parent := _PARENT_OWNER.search(fqn):
            owner = parent.group(1).strip()
        elif suffix := suffix_re.search(leaf):
            owner = suffix.group(1).strip()

        if not owner or (allowed and owner not in allowed):
            continue

        tracked[owner] = TrackedAccount(account_id=str(account_id), account_name=fqn)

    return tracked


class QuickBooksReportFetcher:
    """Implements ReportFetcherProtocol against QuickBooks Online.

    Example:
        >>> fetcher = QuickBooksReportFetcher(
        ...     base_urls={QboEnvironment.PRODUCTION: "https://quickbooks.api.intuit.com"},
        ... )
        >>> result = await fetcher.fetch_all(credential, date(2024, 1, 1), date(2024, 6, 10))
    """

    def __init__(
        self,
        *,
        base_urls: Mapping[QboEnvironment, str],
        timeout: float = PROVIDER_TIMEOUT_DEFAULT,
        track_sub_accounts: bool = True,
        sub_account_name_pattern: str = "Retirement Contribution",
        sub_account_owners: Iterable[str] = (),
    ) -> None:
        """Initialize fetcher.

        Args:
            base_urls: API base URL per environment.
            timeout: Per-request timeout in seconds.
            track_sub_accounts: Discover sub-accounts and fetch their ledgers.
            sub_account_name_pattern: Regex matched against account names.
            sub_account_owners: Owner allow-list (empty = all).
        """
        self._base_urls = base_urls
        self._timeout = timeout
        self._track_sub_accounts = track_sub_accounts
        self._name_pattern = sub_account_name_pattern
        self._owners = tuple(sub_account_owners)

    async def fetch_all(
        self,
        credential: CredentialRecord,
        range_start: date,
        range_end: date,
    ) -> Result[ReportBundle, ReportFetchError]:
        """Fetch the whole bundle, stopping at the first failure.

        Args:
            credential: Valid credential (access token, realm, environment).
            range_start: First day of the range.
            range_end: Last day of the range.

        Returns:
            Success(ReportBundle), or Failure(ReportFetchError) naming the
            step that failed.
        """
        api = QuickBooksReportsAPI(
            base_url=self._base_urls[credential.environment],
            timeout=self._timeout,
        )
        realm_id = credential.account_id
        token = credential.access_token
        dates = {
            "start_date": range_start.isoformat(),
            "end_date": range_end.isoformat(),
        }
        log = logger.bind(
            environment=credential.environment.value,
            start_date=dates["start_date"],
            end_date=dates["end_date"],
        )
        log.info("report_bundle_fetch_started")

        daily = await api.get_report(
            access_token=token,
            realm_id=realm_id,
            report_name="ProfitAndLoss",
            params={**dates, "summarize_column_by": "Days"},
            step=FetchStep.DAILY_PROFIT_AND_LOSS,
        )
        if isinstance(daily, Failure):
            return self._failed(log, daily)

        by_class = await api.get_report(
            access_token=token,
            realm_id=realm_id,
            report_name="ProfitAndLoss",
            params={**dates, "summarize_column_by": "Classes"},
            step=FetchStep.CLASS_PROFIT_AND_LOSS,
        )
        if isinstance(by_class, Failure):
            return self._failed(log, by_class)

        balance_sheet = await api.get_report(
            access_token=token,
            realm_id=realm_id,
            report_name="BalanceSheet",
            params={**dates, "accounting_method": "Cash"},
            step=FetchStep.BALANCE_SHEET,
        )
        if isinstance(balance_sheet, Failure):
            return self._failed(log, balance_sheet)

        tracked: dict[str, TrackedAccount] | None = None
        ledgers: dict[str, dict[str, Any]] | None = None

        if self._track_sub_accounts:
            discovery = await api.query(
                access_token=token,
                realm_id=realm_id,
                statement=SUB_ACCOUNT_DISCOVERY_QUERY,
                step=FetchStep.SUB_ACCOUNT_DISCOVERY,
            )
            if isinstance(discovery, Failure):
                return self._failed(log, discovery)
            if account_list(discovery.value) is None:
                return self._failed(
                    log,
                    Failure(
                        error=ReportFetchError(
                            code=ErrorCode.FETCH_FAILED,
                            message=(
                                "sub_account_discovery returned an unexpected"
                                " account list"
                            ),
                            step=FetchStep.SUB_ACCOUNT_DISCOVERY,
                        )
                    ),
                )

            tracked = extract_tracked_accounts(
                discovery.value,
                name_pattern=self._name_pattern,
                owners=self._owners,
            )
            ledgers = {}
            for owner, account in tracked.items():
                ledger = await api.get_report(
                    access_token=token,
                    realm_id=realm_id,
                    report_name="GeneralLedger",
                    params={
                        **dates,
                        "columns": SUB_LEDGER_COLUMNS,
                        "account": account.account_id,
                    },
                    step=FetchStep.SUB_LEDGER,
                )
                if isinstance(ledger, Failure):
                    return self._failed(log, ledger, owner=owner)
                ledgers[owner] = ledger.value

        bundle = ReportBundle(
            daily_report=daily.value,
            class_report=by_class.value,
            balance_sheet_report=balance_sheet.value,
            tracked_accounts=tracked,
            auxiliary_ledger_data=ledgers,
        )
        log.info(
            "report_bundle_fetch_succeeded",
            tracked_account_count=bundle.tracked_account_count,
        )
        return Success(value=bundle)

    @staticmethod
    def _failed(
        log: Any,
        failure: Failure[ReportFetchError],
        **context: Any,
    ) -> Failure[ReportFetchError]:
        log.warning(
            "report_bundle_fetch_failed",
            step=failure.error.step.value,
            status_code=failure.error.status_code,
            **context,
        )
        return failure
