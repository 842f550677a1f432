"""Application DTOs."""

from ledger_sync.application.dtos.sync_dtos import SyncOutcome

__all__ = ["SyncOutcome"]
