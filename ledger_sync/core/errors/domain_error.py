"""Base error class for Railway-Oriented Programming.

DomainError is the base class for every error the sync engine produces.
Errors are returned inside ``Failure`` values, never raised, so it does NOT
inherit from Exception.

Usage:
    @dataclass(frozen=True, slots=True, kw_only=True)
    class NotConnectedError(DomainError):
        environment: str
"""

from dataclasses import dataclass
from typing import Any

from ledger_sync.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging and client responses.
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
