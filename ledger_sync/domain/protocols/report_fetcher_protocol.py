"""Report fetcher protocol."""

from datetime import date
from typing import Protocol

from ledger_sync.core.result import Result
from ledger_sync.domain.entities.credential_record import CredentialRecord
from ledger_sync.domain.errors import ReportFetchError
from ledger_sync.domain.value_objects.report_bundle import ReportBundle


class ReportFetcherProtocol(Protocol):
    """Fetches the complete report bundle for a date range."""

    async def fetch_all(
        self,
        credential: CredentialRecord,
        range_start: date,
        range_end: date,
    ) -> Result[ReportBundle, ReportFetchError]:
        """Fetch every report sequentially, stopping at the first failure.

        Returns:
            Success(ReportBundle) when every call succeeded,
            Failure(ReportFetchError) naming the failing step otherwise.
        """
        ...
