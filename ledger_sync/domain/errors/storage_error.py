"""Persistence failures."""

from dataclasses import dataclass

from ledger_sync.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class StorageError(DomainError):
    """The persistence collaborator failed on read or write.

    Attributes:
        operation: Repository operation that failed (e.g. "cache_upsert").
    """

    operation: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConcurrentUpdateError(DomainError):
    """A conditional write lost to another invocation.

    Attributes:
        resource_type: "cache_entry" or "credential".
        expected_version: Version the writer observed before writing.
    """

    resource_type: str
    expected_version: int | None = None
