"""JWT token service (adapter).

Resolves dashboard users from HS256 JWTs issued by the identity provider the
dashboard uses. Only two claims matter here:

    sub       user identifier
    is_admin  admin users may force a sync past the gate

Token issuance lives outside this service; ``generate_access_token`` exists
for local tooling and tests.
"""

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt.exceptions import InvalidTokenError
from uuid_extensions import uuid7

from ledger_sync.domain.entities.caller import Caller


class JWTService:
    """JWT validation and caller resolution.

    Usage:
        from ledger_sync.core.container import get_token_service

        caller = get_token_service().resolve_caller(token)
        if caller is None:
            ...  # anonymous
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expiration_minutes: int = 15,
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: HMAC secret (at least 32 bytes).
            algorithm: Signing algorithm.
            expiration_minutes: Lifetime of generated tokens.

        Raises:
            ValueError: If secret_key is shorter than 32 bytes.
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expiration_minutes = expiration_minutes

    def generate_access_token(self, user_id: str, *, is_admin: bool = False) -> str:
        """Generate a signed access token.

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> token = service.generate_access_token("user-1", is_admin=True)
            >>> service.resolve_caller(token)
            Caller(id='user-1', is_admin=True, is_scheduled=False)
        """
        now = datetime.now(UTC)
        payload: dict[str, Any] = {
            "sub": user_id,
            "is_admin": is_admin,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(minutes=self._expiration_minutes)).timestamp()),
            "jti": str(uuid7()),
        }
        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def resolve_caller(self, token: str) -> Caller | None:
        """Validate a token and return the caller it identifies.

        Signature and expiry are checked by PyJWT.

        Returns:
            Caller for a valid token with a ``sub`` claim, None otherwise.
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token, self._secret_key, algorithms=[self._algorithm]
            )
        except InvalidTokenError:
            return None

        subject = payload.get("sub")
        if not subject:
            return None

        return Caller(
            id=str(subject),
            is_admin=payload.get("is_admin") is True,
            is_scheduled=False,
        )
