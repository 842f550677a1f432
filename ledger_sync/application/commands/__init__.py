"""Commands (CQRS write operations)."""

from ledger_sync.application.commands.sync_commands import SyncReports

__all__ = ["SyncReports"]
