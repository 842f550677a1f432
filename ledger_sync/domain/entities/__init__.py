"""Domain entities.

Usage:
    from ledger_sync.domain.entities import CacheEntry, Caller, CredentialRecord
"""

from ledger_sync.domain.entities.audit_log_entry import AuditLogEntry
from ledger_sync.domain.entities.cache_entry import CacheEntry
from ledger_sync.domain.entities.caller import Caller
from ledger_sync.domain.entities.credential_record import CredentialRecord

__all__ = [
    "AuditLogEntry",
    "CacheEntry",
    "Caller",
    "CredentialRecord",
]
