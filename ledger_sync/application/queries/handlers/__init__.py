"""Query handlers."""

from ledger_sync.application.queries.handlers.get_cached_reports_handler import (
    GetCachedReportsHandler,
)

__all__ = ["GetCachedReportsHandler"]
