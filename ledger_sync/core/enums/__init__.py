"""Core enums."""

from ledger_sync.core.enums.environment import Environment
from ledger_sync.core.enums.error_code import ErrorCode

__all__ = ["Environment", "ErrorCode"]
