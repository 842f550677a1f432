"""Sync audit log database model (append-only)."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from ledger_sync.infrastructure.persistence.base import BaseModel


class SyncAuditLog(BaseModel):
    """One row per scheduled sync invocation.

    Inherits from BaseModel (no updated_at): rows are never modified.

    Fields:
        status: success, skipped or error
        details: Period, range, timing, gate reason, error context
        executed_at: When the invocation finished
    """

    __tablename__ = "sync_audit_logs"

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        index=True,
        comment="success, skipped or error",
    )

    details: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
    )

    executed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    __table_args__ = (Index("idx_sync_audit_executed_at", "executed_at"),)
