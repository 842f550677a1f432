"""
Main FastAPI application entry point.

Builds the application: lifespan (database disposal), global exception
handlers, the unversioned system router and the v1 API under the
configured prefix.

Run:
    uvicorn ledger_sync.main:app
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ledger_sync.core.config import get_settings
from ledger_sync.core.container import get_database, get_logger
from ledger_sync.presentation.routers import system_router, v1_router
from ledger_sync.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: log configuration summary
    - Shutdown: dispose the database engine

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    settings = get_settings()
    logger = get_logger()
    logger.info(
        "application_started",
        environment=settings.environment.value,
        qbo_environment=settings.qbo_environment.value,
        sync_timezone=settings.sync_timezone,
        data_cutoff_hour=settings.data_cutoff_hour,
    )

    yield

    await get_database().close()
    logger.info("application_stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Scheduled accounting report sync with a per-period cache",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Register global exception handlers ({error, message, details} bodies)
    register_exception_handlers(app)

    app.include_router(system_router)
    app.include_router(v1_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()
