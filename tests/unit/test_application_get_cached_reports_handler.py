"""Unit tests for GetCachedReportsHandler."""

from unittest.mock import AsyncMock

from ledger_sync.application.queries.handlers.get_cached_reports_handler import (
    GetCachedReportsHandler,
)
from ledger_sync.application.queries.report_queries import GetCachedReports
from ledger_sync.core.enums import ErrorCode
from ledger_sync.core.errors import NotFoundError
from ledger_sync.core.result import Failure, Success
from ledger_sync.domain.protocols.cache_store_protocol import CacheStoreProtocol
from tests.utils.factories import create_cache_entry


async def test_returns_cached_entry():
    cache_store = AsyncMock(spec=CacheStoreProtocol)
    entry = create_cache_entry()
    cache_store.read.return_value = Success(value=entry)

    result = await GetCachedReportsHandler(cache_store).handle(GetCachedReports(period=2024))

    assert result == Success(value=entry)
    cache_store.read.assert_awaited_once_with(2024)


async def test_never_synced_period_is_no_cached_data():
    cache_store = AsyncMock(spec=CacheStoreProtocol)
    cache_store.read.return_value = Failure(
        error=NotFoundError(
            code=ErrorCode.NO_CACHED_DATA,
            message="No cached data for 2023. Run a sync first.",
            resource_type="cache_entry",
            resource_id="2023",
        )
    )

    result = await GetCachedReportsHandler(cache_store).handle(GetCachedReports(period=2023))

    assert isinstance(result, Failure)
    assert result.error.code == ErrorCode.NO_CACHED_DATA
