"""CredentialRepository - SQLAlchemy implementation.

Maps between the domain CredentialRecord and the LedgerCredential model.
Token replacement is one conditional UPDATE, so access token, refresh token
and expiry always change together and a concurrent refresh is detected by
the version check.
"""

from typing import Any, cast

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_sync.core.enums import ErrorCode
from ledger_sync.core.result import Failure, Result, Success
from ledger_sync.domain.entities.credential_record import CredentialRecord
from ledger_sync.domain.enums.qbo_environment import QboEnvironment
from ledger_sync.domain.errors import ConcurrentUpdateError, StorageError
from ledger_sync.infrastructure.persistence.models.ledger_credential import (
    LedgerCredential as LedgerCredentialModel,
)


class CredentialRepository:
    """SQLAlchemy implementation of the CredentialRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_environment(
        self,
        environment: QboEnvironment,
    ) -> Result[CredentialRecord | None, StorageError]:
        """Find the credential for an environment.

        Args:
            environment: Remote environment.

        Returns:
            Success(CredentialRecord | None), or Failure(StorageError).
        """
        stmt = (
            select(LedgerCredentialModel)
            .where(LedgerCredentialModel.environment == environment.value)
            .execution_options(populate_existing=True)
        )
        try:
            result = await self.session.execute(stmt)
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            return cast(
                Result[CredentialRecord | None, StorageError],
                Failure(error=_storage_error("credential_read", e)),
            )

        if model is None:
            return Success(value=None)
        return Success(value=self._to_domain(model))

    async def replace_tokens(
        self,
        record: CredentialRecord,
        *,
        expected_version: int,
    ) -> Result[CredentialRecord, StorageError | ConcurrentUpdateError]:
        """Replace the token triple if the stored version is unchanged.

        Args:
            record: Credential carrying the new tokens and version.
            expected_version: Version observed before the refresh.

        Returns:
            Success(CredentialRecord), Failure(ConcurrentUpdateError) when the
            version moved on, or Failure(StorageError).
        """
        stmt = (
            update(LedgerCredentialModel)
            .where(
                LedgerCredentialModel.environment == record.environment.value,
                LedgerCredentialModel.version == expected_version,
            )
            .values(
                access_token=record.access_token,
                refresh_token=record.refresh_token,
                expires_at=record.expires_at,
                version=record.version,
                updated_at=func.now(),
            )
            .execution_options(synchronize_session=False)
        )
        try:
            result: Any = await self.session.execute(stmt)
            if result.rowcount != 1:
                await self.session.rollback()
                return cast(
                    Result[CredentialRecord, StorageError | ConcurrentUpdateError],
                    Failure(
                        error=ConcurrentUpdateError(
                            code=ErrorCode.CONCURRENT_UPDATE,
                            message="Credential was refreshed by another invocation",
                            resource_type="credential",
                            expected_version=expected_version,
                        )
                    ),
                )
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            return cast(
                Result[CredentialRecord, StorageError | ConcurrentUpdateError],
                Failure(error=_storage_error("credential_replace_tokens", e)),
            )

        return Success(value=record)

    def _to_domain(self, model: LedgerCredentialModel) -> CredentialRecord:
        """Convert database model to domain entity."""
        return CredentialRecord(
            environment=QboEnvironment(model.environment),
            account_id=model.account_id,
            access_token=model.access_token,
            refresh_token=model.refresh_token,
            expires_at=model.expires_at,
            version=model.version,
        )


def _storage_error(operation: str, exc: SQLAlchemyError) -> StorageError:
    return StorageError(
        code=ErrorCode.STORAGE_ERROR,
        message="Credential storage is unavailable",
        operation=operation,
        details={"error_type": type(exc).__name__},
    )
