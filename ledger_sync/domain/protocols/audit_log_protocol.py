"""AuditLog protocol (append-only)."""

from typing import Protocol

from ledger_sync.core.result import Result
from ledger_sync.domain.entities.audit_log_entry import AuditLogEntry
from ledger_sync.domain.errors import StorageError


class AuditLogProtocol(Protocol):
    """Append-only audit log of scheduled invocations.

    Entries are never updated or deleted.
    """

    async def append(self, entry: AuditLogEntry) -> Result[None, StorageError]:
        """Append one entry.

        Returns:
            Success(None) once written, Failure(StorageError) otherwise.
        """
        ...
