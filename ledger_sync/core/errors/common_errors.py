"""Generic errors shared by every layer.

- NotFoundError: a record does not exist
- AuthenticationError: caller could not be identified
"""

from dataclasses import dataclass

from ledger_sync.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Record not found.

    Attributes:
        resource_type: Kind of record (cache_entry, credential).
        resource_id: Key that was looked up.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Caller could not be identified (no valid token, wrong secret)."""

    pass

