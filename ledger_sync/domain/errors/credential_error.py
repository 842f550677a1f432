"""Errors produced by the credential lifecycle.

- NotConnectedError: no credential record exists for the environment; an
  admin must run the connect flow again.
- CredentialConfigurationError: client id/secret missing for the environment;
  fatal, the operator must fix configuration. Never retried.
- TokenRefreshError: the token endpoint rejected the refresh or could not be
  reached. The stored credential is left untouched.
"""

from dataclasses import dataclass

from ledger_sync.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotConnectedError(DomainError):
    """No credential on file.

    Attributes:
        environment: Remote environment that was looked up.
    """

    environment: str


@dataclass(frozen=True, slots=True, kw_only=True)
class CredentialConfigurationError(DomainError):
    """Client credentials for the environment are not configured.

    Attributes:
        environment: Remote environment missing configuration.
    """

    environment: str


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenRefreshError(DomainError):
    """Remote token exchange failed.

    Attributes:
        status_code: HTTP status from the token endpoint (None on transport failure).
        response_body: Truncated response body for debugging.
        is_transient: Whether retrying later may succeed (timeouts, 5xx).
    """

    status_code: int | None = None
    response_body: str | None = None
    is_transient: bool = False
