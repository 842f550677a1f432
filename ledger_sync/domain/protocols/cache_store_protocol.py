"""CacheStore protocol for the per-period report cache."""

from typing import Protocol

from ledger_sync.core.errors import NotFoundError
from ledger_sync.core.result import Result
from ledger_sync.domain.entities.cache_entry import CacheEntry
from ledger_sync.domain.errors import ConcurrentUpdateError, StorageError


class CacheStoreProtocol(Protocol):
    """Cache store protocol (port).

    Entries are written whole; there is no partial update.
    """

    async def read(self, period: int) -> Result[CacheEntry, NotFoundError | StorageError]:
        """Read the cached entry for a period.

        Returns:
            Success(CacheEntry): Cached entry.
            Failure(NotFoundError): Period has never been synced.
            Failure(StorageError): Database failure.
        """
        ...

    async def upsert(
        self,
        entry: CacheEntry,
        *,
        expected_version: int | None,
    ) -> Result[CacheEntry, StorageError | ConcurrentUpdateError]:
        """Write every field of an entry in a single statement.

        Args:
            entry: Complete entry to store.
            expected_version: Version read before the sync, or None when the
                period had no entry (insert).

        Returns:
            Success(CacheEntry): Stored entry with its new version.
            Failure(ConcurrentUpdateError): Entry changed (or was created)
                since it was read; the other writer's entry is kept.
            Failure(StorageError): Database failure.
        """
        ...
