"""QuickBooks OAuth2 token client.

Exchanges a refresh token for a new access token:

    POST {token_url}
    Authorization: Basic base64(client_id:client_secret)
    Content-Type: application/x-www-form-urlencoded
    Accept: application/json

    grant_type=refresh_token&refresh_token=...

The endpoint may or may not rotate the refresh token; a missing
``refresh_token`` in the response means the old one is still valid.
"""

import base64
from typing import Any

import httpx
import structlog

from ledger_sync.core.constants import (
    PROVIDER_TIMEOUT_DEFAULT,
    RESPONSE_BODY_MAX_LENGTH,
    TOKEN_EXPIRES_IN_DEFAULT,
)
from ledger_sync.core.enums import ErrorCode
from ledger_sync.core.result import Failure, Result, Success
from ledger_sync.domain.errors import TokenRefreshError
from ledger_sync.domain.protocols.token_client_protocol import OAuthTokens

logger = structlog.get_logger(__name__)


class QuickBooksTokenClient:
    """Implements TokenClientProtocol against the QuickBooks token endpoint."""

    def __init__(
        self,
        *,
        token_url: str,
        timeout: float = PROVIDER_TIMEOUT_DEFAULT,
    ) -> None:
        """Initialize token client.

        Args:
            token_url: OAuth2 token endpoint.
            timeout: HTTP request timeout in seconds.
        """
        self._token_url = token_url
        self._timeout = timeout

    @staticmethod
    def _basic_auth_header(client_id: str, client_secret: str) -> str:
        encoded = base64.b64encode(f"{client_id}:{client_secret}".encode()).decode()
        return f"Basic {encoded}"

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
            client_id: OAuth client ID.
            client_secret: OAuth client secret.

        Returns:
            Success(OAuthTokens), or Failure(TokenRefreshError) on non-2xx,
            transport failure or an unusable body.
        """
        logger.info("quickbooks_token_refresh_started")

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    self._token_url,
                    headers={
                        "Authorization": self._basic_auth_header(client_id, client_secret),
                        "Content-Type": "application/x-www-form-urlencoded",
                        "Accept": "application/json",
                    },
                    data={
                        "grant_type": "refresh_token",
                        "refresh_token": refresh_token,
                    },
                )
        except httpx.TimeoutException as e:
            logger.warning("quickbooks_token_refresh_timeout", error=str(e))
            return Failure(
                error=TokenRefreshError(
                    code=ErrorCode.REFRESH_FAILED,
                    message="Token refresh timed out",
                    is_transient=True,
                )
            )
        except httpx.RequestError as e:
            logger.warning("quickbooks_token_refresh_connection_error", error=str(e))
            return Failure(
                error=TokenRefreshError(
                    code=ErrorCode.REFRESH_FAILED,
                    message=f"Failed to reach token endpoint: {e}",
                    is_transient=True,
                )
            )

        return self._handle_token_response(response)

    def _handle_token_response(
        self,
        response: httpx.Response,
    ) -> Result[OAuthTokens, TokenRefreshError]:
        """Turn the token endpoint response into OAuthTokens."""
        status = response.status_code
        body = response.text[:RESPONSE_BODY_MAX_LENGTH]

        if not response.is_success:
            logger.warning("quickbooks_token_refresh_rejected", status_code=status)
            return Failure(
                error=TokenRefreshError(
                    code=ErrorCode.REFRESH_FAILED,
                    message=f"Token refresh failed with status {status}",
                    status_code=status,
                    response_body=body,
                    is_transient=status == 429 or status >= 500,
                )
            )

        try:
            data: Any = response.json()
        except ValueError as e:
            logger.error("quickbooks_token_refresh_invalid_json", error=str(e))
            return Failure(
                error=TokenRefreshError(
                    code=ErrorCode.REFRESH_FAILED,
                    message="Token endpoint returned invalid JSON",
                    status_code=status,
                    response_body=body,
                )
            )

        access_token = data.get("access_token") if isinstance(data, dict) else None
        if not access_token:
            logger.error("quickbooks_token_refresh_missing_access_token")
            return Failure(
                error=TokenRefreshError(
                    code=ErrorCode.REFRESH_FAILED,
                    message="Token endpoint response has no access_token",
                    status_code=status,
                    response_body=body,
                )
            )

        expires_in = data.get("expires_in")
        if expires_in is None:
            expires_in = TOKEN_EXPIRES_IN_DEFAULT
        refresh_token = data.get("refresh_token") or None
        if (
            not isinstance(access_token, str)
            or isinstance(expires_in, bool)
            or not isinstance(expires_in, int)
            or not (refresh_token is None or isinstance(refresh_token, str))
        ):
            logger.error(
                "quickbooks_token_refresh_malformed_response",
                expires_in_type=type(expires_in).__name__,
            )
            return Failure(
                error=TokenRefreshError(
                    code=ErrorCode.REFRESH_FAILED,
                    message="Token endpoint response has malformed fields",
                    status_code=status,
                    response_body=body,
                )
            )

        tokens = OAuthTokens(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_in=expires_in,
            token_type=data.get("token_type", "bearer"),
        )
        logger.info(
            "quickbooks_token_refresh_succeeded",
            expires_in=tokens.expires_in,
            refresh_token_rotated=tokens.refresh_token is not None,
        )
        return Success(value=tokens)
