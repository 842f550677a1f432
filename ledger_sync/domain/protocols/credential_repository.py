"""CredentialRepository protocol for OAuth credential persistence.

Port (interface) for hexagonal architecture. Database failures are returned
as ``StorageError`` rather than raised.
"""

from typing import Protocol

from ledger_sync.core.result import Result
from ledger_sync.domain.entities.credential_record import CredentialRecord
from ledger_sync.domain.enums.qbo_environment import QboEnvironment
from ledger_sync.domain.errors import ConcurrentUpdateError, StorageError


class CredentialRepository(Protocol):
    """Credential repository protocol (port).

    Methods:
        find_by_environment: Load the credential for an environment.
        replace_tokens: Conditionally replace the token triple.
    """

    async def find_by_environment(
        self,
        environment: QboEnvironment,
    ) -> Result[CredentialRecord | None, StorageError]:
        """Find the credential for an environment.

        Returns:
            Success(CredentialRecord) if found, Success(None) if no record,
            Failure(StorageError) on database failure.
        """
        ...

    async def replace_tokens(
        self,
        record: CredentialRecord,
        *,
        expected_version: int,
    ) -> Result[CredentialRecord, StorageError | ConcurrentUpdateError]:
        """Replace access token, refresh token and expiry in one statement.

        The write only applies when the stored version still equals
        ``expected_version``; the stored version becomes ``record.version``.

        Args:
            record: Credential carrying the new tokens and version.
            expected_version: Version observed before the refresh.

        Returns:
            Success(CredentialRecord): Persisted record.
            Failure(ConcurrentUpdateError): Another invocation refreshed first.
            Failure(StorageError): Database failure.
        """
        ...
