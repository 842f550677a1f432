"""QuickBooks Online adapters.

- QuickBooksTokenClient: OAuth2 refresh-token exchange
- QuickBooksReportsAPI: report and query endpoints
- QuickBooksReportFetcher: sequential, fail-fast report bundle fetch
"""

from ledger_sync.infrastructure.providers.quickbooks.report_fetcher import (
    QuickBooksReportFetcher,
)
from ledger_sync.infrastructure.providers.quickbooks.token_client import (
    QuickBooksTokenClient,
)

__all__ = ["QuickBooksReportFetcher", "QuickBooksTokenClient"]
