"""Credential store service.

Keeps the OAuth credential usable: loads it, and when the access token is
close to expiry exchanges the refresh token and persists the new token
triple before handing it out.

Architecture:
    - Application service (uses repository and token client ports)
    - Returns Result types; nothing is raised
    - Persistence is a compare-and-swap on the credential version, so two
      overlapping refreshes cannot silently overwrite each other

Usage:
    store = CredentialStore(
        credential_repo=repo,
        token_client=client,
        client_credentials={QboEnvironment.PRODUCTION: ("id", "secret")},
        threshold_seconds=300,
        logger=logger,
    )
    match await store.load(QboEnvironment.PRODUCTION):
        case Success(value=record):
            result = await store.ensure_valid(record)
"""

import time
from collections.abc import Mapping
from typing import cast

from ledger_sync.core.constants import TOKEN_REFRESH_THRESHOLD_SECONDS_DEFAULT
from ledger_sync.core.enums import ErrorCode
from ledger_sync.core.errors import DomainError
from ledger_sync.core.result import Failure, Result, Success
from ledger_sync.domain.entities.credential_record import CredentialRecord
from ledger_sync.domain.enums.qbo_environment import QboEnvironment
from ledger_sync.domain.errors import (
    ConcurrentUpdateError,
    CredentialConfigurationError,
    NotConnectedError,
    StorageError,
)
from ledger_sync.domain.protocols.credential_repository import CredentialRepository
from ledger_sync.domain.protocols.logger_protocol import LoggerProtocol
from ledger_sync.domain.protocols.token_client_protocol import TokenClientProtocol


class CredentialStore:
    """Loads and refreshes the OAuth credential.

    Dependencies (injected via constructor):
        - CredentialRepository: credential persistence
        - TokenClientProtocol: remote token endpoint
        - LoggerProtocol: structured logging
    """

    def __init__(
        self,
        *,
        credential_repo: CredentialRepository,
        token_client: TokenClientProtocol,
        client_credentials: Mapping[QboEnvironment, tuple[str | None, str | None]],
        logger: LoggerProtocol,
        threshold_seconds: int = TOKEN_REFRESH_THRESHOLD_SECONDS_DEFAULT,
    ) -> None:
        """Initialize store with dependencies.

        Args:
            credential_repo: Credential repository.
            token_client: Client for the OAuth token endpoint.
            client_credentials: Environment -> (client_id, client_secret).
            logger: Structured logger.
            threshold_seconds: Refresh when the token expires within this window.
        """
        self._credential_repo = credential_repo
        self._token_client = token_client
        self._client_credentials = client_credentials
        self._logger = logger
        self._threshold_seconds = threshold_seconds

    async def load(
        self,
        environment: QboEnvironment,
    ) -> Result[CredentialRecord, NotConnectedError | StorageError]:
        """Load the credential for an environment.

        Returns:
            Success(CredentialRecord): Stored credential.
            Failure(NotConnectedError): No credential on file.
            Failure(StorageError): Database failure.
        """
        result = await self._credential_repo.find_by_environment(environment)
        if isinstance(result, Failure):
            return result

        if result.value is None:
            self._logger.warning(
                "credential_not_found", environment=environment.value
            )
            return cast(
                Result[CredentialRecord, NotConnectedError | StorageError],
                Failure(
                    error=NotConnectedError(
                        code=ErrorCode.NOT_CONNECTED,
                        message="Accounting service is not connected. "
                        "An admin must connect it first.",
                        environment=environment.value,
                    )
                ),
            )
        return Success(value=result.value)

    async def ensure_valid(
        self,
        record: CredentialRecord,
        *,
        now: int | None = None,
    ) -> Result[CredentialRecord, DomainError]:
        """Return a credential whose access token is safe to use.

        A token with more than ``threshold_seconds`` left is returned as is.
        Otherwise the refresh token is exchanged and the new record is
        persisted before it is returned. On any failure the stored record is
        left exactly as it was.

        Args:
            record: Credential as loaded.
            now: Current time in epoch seconds (defaults to the wall clock).

        Returns:
            Success(CredentialRecord): Usable credential.
            Failure(CredentialConfigurationError): Client id/secret missing.
            Failure(TokenRefreshError): Token endpoint rejected the refresh.
            Failure(ConcurrentUpdateError): Lost a refresh race and the
                winner's record is not usable either.
            Failure(StorageError): New tokens could not be persisted.
        """
        now_ts = int(time.time()) if now is None else now

        if not record.needs_refresh(now=now_ts, threshold_seconds=self._threshold_seconds):
            return Success(value=record)

        log = self._logger.bind(
            environment=record.environment.value,
            seconds_until_expiry=record.seconds_until_expiry(now_ts),
        )

        client_id, client_secret = self._client_credentials.get(
            record.environment, (None, None)
        )
        if not client_id or not client_secret:
            log.error("credential_refresh_not_configured")
            return cast(
                Result[CredentialRecord, DomainError],
                Failure(
                    error=CredentialConfigurationError(
                        code=ErrorCode.CONFIGURATION_ERROR,
                        message="OAuth client credentials are not configured "
                        f"for the {record.environment.value} environment",
                        environment=record.environment.value,
                    )
                ),
            )

        log.info("credential_refresh_started")
        refresh_result = await self._token_client.refresh_access_token(
            refresh_token=record.refresh_token,
            client_id=client_id,
            client_secret=client_secret,
        )
        if isinstance(refresh_result, Failure):
            log.warning(
                "credential_refresh_failed",
                status_code=refresh_result.error.status_code,
            )
            return refresh_result

        tokens = refresh_result.value
        refreshed = record.with_tokens(
            access_token=tokens.access_token,
            refresh_token=tokens.refresh_token or record.refresh_token,
            expires_at=now_ts + tokens.expires_in,
        )

        persisted = await self._credential_repo.replace_tokens(
            refreshed, expected_version=record.version
        )
        match persisted:
            case Success(value=stored):
                log.info(
                    "credential_refresh_succeeded",
                    expires_at=stored.expires_at,
                    version=stored.version,
                )
                return Success(value=stored)
            case Failure(error=ConcurrentUpdateError() as conflict):
                return await self._resolve_lost_race(record, conflict, now_ts)
            case Failure(error=error):
                # Remote exchange already happened; the old refresh token may
                # be revoked and the new one is not stored anywhere.
                log.critical("credential_refresh_not_persisted", error_message=error.message)
                return cast(Result[CredentialRecord, DomainError], Failure(error=error))
        return cast(Result[CredentialRecord, DomainError], persisted)

    async def _resolve_lost_race(
        self,
        record: CredentialRecord,
        conflict: ConcurrentUpdateError,
        now_ts: int,
    ) -> Result[CredentialRecord, DomainError]:
        """Use the concurrent winner's credential when it is valid."""
        self._logger.warning(
            "credential_refresh_conflict",
            environment=record.environment.value,
            expected_version=record.version,
        )
        reloaded = await self._credential_repo.find_by_environment(record.environment)
        match reloaded:
            case Success(value=CredentialRecord() as winner) if not winner.needs_refresh(
                now=now_ts, threshold_seconds=self._threshold_seconds
            ):
                return Success(value=winner)
            case Failure(error=error):
                return cast(Result[CredentialRecord, DomainError], Failure(error=error))
        return cast(Result[CredentialRecord, DomainError], Failure(error=conflict))
