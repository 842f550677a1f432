"""GetCachedReports query handler.

Reads never contact the remote service. A period that was never synced
comes back as NotFoundError with code ``no_cached_data``.
"""

from typing import cast

from ledger_sync.application.queries.report_queries import GetCachedReports
from ledger_sync.core.errors import DomainError
from ledger_sync.core.result import Result
from ledger_sync.domain.entities.cache_entry import CacheEntry
from ledger_sync.domain.protocols.cache_store_protocol import CacheStoreProtocol


class GetCachedReportsHandler:
    """Handler for GetCachedReports query."""

    def __init__(self, cache_store: CacheStoreProtocol) -> None:
        self._cache_store = cache_store

    async def handle(self, query: GetCachedReports) -> Result[CacheEntry, DomainError]:
        """Return the cached entry of ``query.period``.

        Returns:
            Success(CacheEntry): Cached bundle.
            Failure(NotFoundError): Period never synced.
            Failure(StorageError): Database failure.
        """
        return cast(
            Result[CacheEntry, DomainError],
            await self._cache_store.read(query.period),
        )
