"""QuickBooks HTTP API clients."""

from ledger_sync.infrastructure.providers.quickbooks.api.reports_api import (
    QuickBooksReportsAPI,
)

__all__ = ["QuickBooksReportsAPI"]
