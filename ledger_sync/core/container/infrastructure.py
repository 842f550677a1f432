"""Process-wide adapters and the per-request database session.

The factories below build each adapter once (``lru_cache``); tests reset
them with ``cache_clear()`` or replace them via ``app.dependency_overrides``.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from ledger_sync.core.config import get_settings
from ledger_sync.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from ledger_sync.domain.protocols.logger_protocol import LoggerProtocol
    from ledger_sync.infrastructure.security.jwt_service import JWTService


@lru_cache()
def get_database() -> Database:
    settings = get_settings()
    return Database(settings.database_url, echo=settings.db_echo)


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Console logger; JSON lines everywhere except development."""
    from ledger_sync.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


@lru_cache()
def get_token_service() -> "JWTService":
    """Verifier for dashboard user JWTs."""
    from ledger_sync.infrastructure.security.jwt_service import JWTService

    settings = get_settings()
    return JWTService(secret_key=settings.secret_key, algorithm=settings.algorithm)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """One session per request, committed when the request's handler returns."""
    async with get_database().get_session() as session:
        yield session
