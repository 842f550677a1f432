"""Container module - centralized dependency injection.

Re-exports every factory so callers import from one place:

    from ledger_sync.core.container import get_logger, get_sync_reports_handler

Modules:
- infrastructure: database, sessions, logging, token service (singletons +
  request-scoped sessions)
- providers: remote accounting service adapters
- sync_handlers: request-scoped command/query handlers
"""

from ledger_sync.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_token_service,
)
from ledger_sync.core.container.providers import get_report_fetcher, get_token_client
from ledger_sync.core.container.sync_handlers import (
    get_get_cached_reports_handler,
    get_sync_reports_handler,
)

__all__ = [
    "get_database",
    "get_db_session",
    "get_get_cached_reports_handler",
    "get_logger",
    "get_report_fetcher",
    "get_sync_reports_handler",
    "get_token_client",
    "get_token_service",
]
