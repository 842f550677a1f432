"""Database implementation of AuditLogProtocol.

Append-only: the adapter has no update or delete path.

Usage:
    adapter = DatabaseAuditAdapter(session)
    result = await adapter.append(
        AuditLogEntry(status=AuditStatus.SKIPPED, details={"period": 2024})
    )
"""

from typing import cast

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_sync.core.enums import ErrorCode
from ledger_sync.core.result import Failure, Result, Success
from ledger_sync.domain.entities.audit_log_entry import AuditLogEntry
from ledger_sync.domain.errors import StorageError
from ledger_sync.infrastructure.persistence.models.sync_audit_log import SyncAuditLog


class DatabaseAuditAdapter:
    """SQLAlchemy implementation of AuditLogProtocol.

    Attributes:
        session: SQLAlchemy async session (injected by container).
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def append(self, entry: AuditLogEntry) -> Result[None, StorageError]:
        """Append one audit entry.

        Args:
            entry: Entry to store.

        Returns:
            Success(None) if written, Failure(StorageError) otherwise.
        """
        try:
            self.session.add(
                SyncAuditLog(
                    id=entry.id,
                    status=entry.status.value,
                    details=entry.details,
                    executed_at=entry.executed_at,
                )
            )
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            return cast(
                Result[None, StorageError],
                Failure(
                    error=StorageError(
                        code=ErrorCode.STORAGE_ERROR,
                        message=f"Failed to append audit entry: {e}",
                        operation="audit_append",
                    )
                ),
            )

        return Success(value=None)
