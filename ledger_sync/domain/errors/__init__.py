"""Domain errors package.

Usage:
    from ledger_sync.domain.errors import ReportFetchError, NotConnectedError
"""

from ledger_sync.domain.errors.credential_error import (
    CredentialConfigurationError,
    NotConnectedError,
    TokenRefreshError,
)
from ledger_sync.domain.errors.report_fetch_error import ReportFetchError
from ledger_sync.domain.errors.storage_error import ConcurrentUpdateError, StorageError
from ledger_sync.domain.errors.sync_error import AlreadySyncedError

__all__ = [
    "AlreadySyncedError",
    "ConcurrentUpdateError",
    "CredentialConfigurationError",
    "NotConnectedError",
    "ReportFetchError",
    "StorageError",
    "TokenRefreshError",
]
