"""Pure domain services (no I/O)."""

from ledger_sync.domain.services.sync_gate import decide

__all__ = ["decide"]
