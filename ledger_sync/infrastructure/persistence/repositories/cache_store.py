"""CacheStore - SQLAlchemy implementation.

Maps between the domain CacheEntry and the ReportCacheEntry model.

Writes are whole-entry:
    - first sync of a period: one INSERT (a racing INSERT hits the unique
      period constraint and becomes ConcurrentUpdateError)
    - later syncs: one ``UPDATE ... WHERE period = :p AND version = :v``
"""

from dataclasses import replace
from datetime import UTC, datetime
from typing import Any, cast

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_sync.core.enums import ErrorCode
from ledger_sync.core.errors import NotFoundError
from ledger_sync.core.result import Failure, Result, Success
from ledger_sync.domain.entities.cache_entry import CacheEntry
from ledger_sync.domain.errors import ConcurrentUpdateError, StorageError
from ledger_sync.domain.value_objects.report_bundle import TrackedAccount
from ledger_sync.infrastructure.persistence.models.report_cache_entry import (
    ReportCacheEntry as ReportCacheEntryModel,
)


class CacheStore:
    """SQLAlchemy implementation of CacheStoreProtocol.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with db.get_session() as session:
        ...     store = CacheStore(session)
        ...     result = await store.read(2024)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize store with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def read(self, period: int) -> Result[CacheEntry, NotFoundError | StorageError]:
        """Read the cached entry for a period.

        Args:
            period: Calendar year.

        Returns:
            Success(CacheEntry), Failure(NotFoundError) if never synced,
            or Failure(StorageError).
        """
        # populate_existing: CAS updates bypass the identity map
        stmt = (
            select(ReportCacheEntryModel)
            .where(ReportCacheEntryModel.period == period)
            .execution_options(populate_existing=True)
        )
        try:
            result = await self.session.execute(stmt)
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            return cast(
                Result[CacheEntry, NotFoundError | StorageError],
                Failure(error=_storage_error("cache_read", e)),
            )

        if model is None:
            return cast(
                Result[CacheEntry, NotFoundError | StorageError],
                Failure(
                    error=NotFoundError(
                        code=ErrorCode.NO_CACHED_DATA,
                        message=f"No cached data for {period}. Run a sync first.",
                        resource_type="cache_entry",
                        resource_id=str(period),
                    )
                ),
            )
        return Success(value=self._to_domain(model))

    async def upsert(
        self,
        entry: CacheEntry,
        *,
        expected_version: int | None,
    ) -> Result[CacheEntry, StorageError | ConcurrentUpdateError]:
        """Write every field of an entry in one statement.

        Args:
            entry: Complete entry.
            expected_version: Version read before the sync (None = insert).

        Returns:
            Success(CacheEntry) with the stored version,
            Failure(ConcurrentUpdateError) when another writer got there
            first, or Failure(StorageError).
        """
        values = self._bundle_values(entry)
        new_version = 1 if expected_version is None else expected_version + 1

        try:
            if expected_version is None:
                self.session.add(
                    ReportCacheEntryModel(period=entry.period, version=new_version, **values)
                )
                await self.session.flush()
            else:
                stmt = (
                    update(ReportCacheEntryModel)
                    .where(
                        ReportCacheEntryModel.period == entry.period,
                        ReportCacheEntryModel.version == expected_version,
                    )
                    .values(version=new_version, updated_at=func.now(), **values)
                    .execution_options(synchronize_session=False)
                )
                result: Any = await self.session.execute(stmt)
                if result.rowcount != 1:
                    await self.session.rollback()
                    return self._conflict(expected_version)
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            return self._conflict(expected_version)
        except SQLAlchemyError as e:
            await self.session.rollback()
            return cast(
                Result[CacheEntry, StorageError | ConcurrentUpdateError],
                Failure(error=_storage_error("cache_upsert", e)),
            )

        return Success(value=replace(entry, version=new_version))

    def _conflict(
        self, expected_version: int | None
    ) -> Result[CacheEntry, StorageError | ConcurrentUpdateError]:
        return cast(
            Result[CacheEntry, StorageError | ConcurrentUpdateError],
            Failure(
                error=ConcurrentUpdateError(
                    code=ErrorCode.CONCURRENT_UPDATE,
                    message="Another sync committed this period first",
                    resource_type="cache_entry",
                    expected_version=expected_version,
                )
            ),
        )

    def _bundle_values(self, entry: CacheEntry) -> dict[str, Any]:
        """Column values for every bundle field."""
        return {
            "last_sync_timestamp": entry.last_sync_timestamp,
            "daily_report": entry.daily_report,
            "class_report": entry.class_report,
            "balance_sheet_report": entry.balance_sheet_report,
            "tracked_accounts": (
                {owner: account.to_dict() for owner, account in entry.tracked_accounts.items()}
                if entry.tracked_accounts is not None
                else None
            ),
            "auxiliary_ledger_data": entry.auxiliary_ledger_data,
            "synced_by": entry.synced_by,
        }

    def _to_domain(self, model: ReportCacheEntryModel) -> CacheEntry:
        """Convert database model to domain entity."""
        return CacheEntry(
            period=model.period,
            last_sync_timestamp=_as_utc(model.last_sync_timestamp),
            daily_report=model.daily_report,
            class_report=model.class_report,
            balance_sheet_report=model.balance_sheet_report,
            tracked_accounts=(
                {
                    owner: TrackedAccount.from_dict(data)
                    for owner, data in model.tracked_accounts.items()
                }
                if model.tracked_accounts is not None
                else None
            ),
            auxiliary_ledger_data=model.auxiliary_ledger_data,
            synced_by=model.synced_by,
            version=model.version,
        )


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on round-trip
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _storage_error(operation: str, exc: SQLAlchemyError) -> StorageError:
    return StorageError(
        code=ErrorCode.STORAGE_ERROR,
        message="Report cache is unavailable",
        operation=operation,
        details={"error_type": type(exc).__name__},
    )
