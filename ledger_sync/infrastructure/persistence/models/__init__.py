"""Database models.

Import every model here so ``BaseModel.metadata`` knows all tables
(Alembic autogenerate and ``Database.create_all`` rely on it).
"""

from ledger_sync.infrastructure.persistence.models.ledger_credential import (
    LedgerCredential,
)
from ledger_sync.infrastructure.persistence.models.report_cache_entry import (
    ReportCacheEntry,
)
from ledger_sync.infrastructure.persistence.models.sync_audit_log import SyncAuditLog

__all__ = ["LedgerCredential", "ReportCacheEntry", "SyncAuditLog"]
