"""Domain protocols (ports).

Infrastructure adapters implement these structurally; nothing inherits from
them.

Usage:
    from ledger_sync.domain.protocols import CacheStoreProtocol, LoggerProtocol
"""

from ledger_sync.domain.protocols.audit_log_protocol import AuditLogProtocol
from ledger_sync.domain.protocols.cache_store_protocol import CacheStoreProtocol
from ledger_sync.domain.protocols.credential_repository import CredentialRepository
from ledger_sync.domain.protocols.logger_protocol import LoggerProtocol
from ledger_sync.domain.protocols.report_fetcher_protocol import ReportFetcherProtocol
from ledger_sync.domain.protocols.token_client_protocol import (
    OAuthTokens,
    TokenClientProtocol,
)

__all__ = [
    "AuditLogProtocol",
    "CacheStoreProtocol",
    "CredentialRepository",
    "LoggerProtocol",
    "OAuthTokens",
    "ReportFetcherProtocol",
    "TokenClientProtocol",
]
