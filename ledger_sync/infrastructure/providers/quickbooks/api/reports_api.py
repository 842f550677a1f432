"""QuickBooks reports API client.

Thin HTTP client for the company-scoped report and query endpoints. Returns
the JSON bodies untouched.

Endpoints:
    GET /v3/company/{realm}/reports/{report_name}
    GET /v3/company/{realm}/query?query=...
"""

from typing import Any
from urllib.parse import quote

from ledger_sync.core.constants import PROVIDER_TIMEOUT_DEFAULT
from ledger_sync.core.result import Result
from ledger_sync.domain.enums.fetch_step import FetchStep
from ledger_sync.domain.errors import ReportFetchError
from ledger_sync.infrastructure.providers.base_api_client import BaseProviderAPIClient


class QuickBooksReportsAPI(BaseProviderAPIClient):
    """HTTP client for QuickBooks reports.

    Example:
        >>> api = QuickBooksReportsAPI(base_url="https://quickbooks.api.intuit.com")
        >>> result = await api.get_report(
        ...     access_token=token,
        ...     realm_id="9130347",
        ...     report_name="BalanceSheet",
        ...     params={"start_date": "2024-01-01", "end_date": "2024-06-10"},
        ...     step=FetchStep.BALANCE_SHEET,
        ... )
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = PROVIDER_TIMEOUT_DEFAULT,
    ) -> None:
        super().__init__(
            base_url=base_url,
            provider_name="quickbooks",
            timeout=timeout,
        )

    async def get_report(
        self,
        *,
        access_token: str,
        realm_id: str,
        report_name: str,
        params: dict[str, str],
        step: FetchStep,
    ) -> Result[dict[str, Any], ReportFetchError]:
        """Fetch one report.

        Args:
            access_token: Valid bearer token.
            realm_id: Remote company id.
            report_name: Report resource (ProfitAndLoss, BalanceSheet, ...).
            params: Report query parameters (minorversion is added).
            step: Bundle step this call belongs to.

        Returns:
            Success(dict) with the raw report, or Failure(ReportFetchError).
        """
        return await self._get_object(
            path=f"/v3/company/{quote(realm_id, safe='')}/reports/{report_name}",
            access_token=access_token,
            params=params,
            step=step,
        )

    async def query(
        self,
        *,
        access_token: str,
        realm_id: str,
        statement: str,
        step: FetchStep,
    ) -> Result[dict[str, Any], ReportFetchError]:
        """Run a query statement against the company entities."""
        return await self._get_object(
            path=f"/v3/company/{quote(realm_id, safe='')}/query",
            access_token=access_token,
            params={"query": statement},
            step=step,
        )
