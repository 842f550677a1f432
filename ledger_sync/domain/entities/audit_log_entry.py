"""Audit log entry for scheduled sync invocations."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from uuid_extensions import uuid7

from ledger_sync.domain.enums.audit_status import AuditStatus


@dataclass(frozen=True, slots=True, kw_only=True)
class AuditLogEntry:
    """One row per scheduled invocation. Immutable once appended.

    Attributes:
        status: success, skipped or error.
        details: Period, range, timings, gate reason and error context.
        executed_at: When the invocation finished.
        id: Time-ordered identifier (UUIDv7).
    """

    status: AuditStatus
    details: dict[str, Any]
    executed_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    id: UUID = field(default_factory=uuid7)
