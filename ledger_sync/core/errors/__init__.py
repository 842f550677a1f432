"""Core errors package.

Usage:
    from ledger_sync.core.errors import DomainError, NotFoundError
"""

from ledger_sync.core.errors.common_errors import AuthenticationError, NotFoundError
from ledger_sync.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "NotFoundError",
    "AuthenticationError",
]
