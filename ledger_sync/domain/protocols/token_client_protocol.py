"""Token client protocol for the remote OAuth token endpoint."""

from dataclasses import dataclass
from typing import Protocol

from ledger_sync.core.result import Result
from ledger_sync.domain.errors import TokenRefreshError


@dataclass(frozen=True, kw_only=True)
class OAuthTokens:
    """Tokens returned by a refresh.

    Attributes:
        access_token: New bearer token.
        refresh_token: New refresh token, or None if the endpoint did not
            rotate it (the old one stays valid).
        expires_in: Seconds until access_token expires.
        token_type: Token type, typically "bearer".
    """

    access_token: str
    refresh_token: str | None
    expires_in: int
    token_type: str = "bearer"


class TokenClientProtocol(Protocol):
    """Exchanges refresh tokens for new access tokens."""

    async def refresh_access_token(
        self,
        *,
        refresh_token: str,
        client_id: str,
        client_secret: str,
    ) -> Result[OAuthTokens, TokenRefreshError]:
        """Exchange a refresh token.

        Args:
            refresh_token: Current refresh token.
            client_id: OAuth client ID of the credential's environment.
            client_secret: OAuth client secret of the credential's environment.

        Returns:
            Success(OAuthTokens) on a 2xx with a usable body,
            Failure(TokenRefreshError) otherwise.
        """
        ...
