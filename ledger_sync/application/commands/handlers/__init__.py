"""Command handlers."""

from ledger_sync.application.commands.handlers.sync_reports_handler import (
    SyncReportsHandler,
)

__all__ = ["SyncReportsHandler"]
