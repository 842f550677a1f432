"""Bearer token authentication dependencies.

One ``Authorization: Bearer <token>`` header carries either the scheduler's
shared cron secret or a dashboard user's JWT. The sync endpoint receives both
the raw token (compared against the cron secret by the command handler) and
the caller resolved from it as a JWT.

Usage:
    @router.get("/reports/{period}")
    async def get_reports(caller: CurrentCaller): ...

    @router.post("/syncs")
    async def trigger_sync(token: PresentedToken, caller: OptionalCaller): ...
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ledger_sync.core.container import get_token_service
from ledger_sync.domain.entities.caller import Caller
from ledger_sync.infrastructure.security.jwt_service import JWTService

# auto_error=False: a missing header is resolved by the handlers, not here
bearer_scheme = HTTPBearer(auto_error=False)


async def get_presented_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> str | None:
    """Return the raw Bearer token, or None when no header was sent."""
    if credentials is None:
        return None
    return credentials.credentials


async def get_optional_caller(
    token: Annotated[str | None, Depends(get_presented_token)],
    token_service: Annotated[JWTService, Depends(get_token_service)],
) -> Caller | None:
    """Resolve the presented token as a user JWT.

    Returns:
        Caller if the token is a valid JWT, None otherwise (including when
        the token is the cron secret).
    """
    if token is None:
        return None
    return token_service.resolve_caller(token)


async def get_current_caller(
    caller: Annotated[Caller | None, Depends(get_optional_caller)],
) -> Caller:
    """Require an authenticated user caller.

    Raises:
        HTTPException: 401 if no valid JWT was presented.
    """
    if caller is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return caller


PresentedToken = Annotated[str | None, Depends(get_presented_token)]
OptionalCaller = Annotated[Caller | None, Depends(get_optional_caller)]
CurrentCaller = Annotated[Caller, Depends(get_current_caller)]
