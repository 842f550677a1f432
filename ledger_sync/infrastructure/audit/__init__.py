"""Audit log adapters."""

from ledger_sync.infrastructure.audit.database_adapter import DatabaseAuditAdapter

__all__ = ["DatabaseAuditAdapter"]
