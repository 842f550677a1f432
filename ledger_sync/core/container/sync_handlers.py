"""Sync handler dependency factories.

Request-scoped handler instances; every repository in one request shares
the request's database session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ledger_sync.core.config import get_settings
from ledger_sync.core.container.infrastructure import get_db_session, get_logger
from ledger_sync.core.container.providers import get_report_fetcher, get_token_client
from ledger_sync.domain.enums.qbo_environment import QboEnvironment

if TYPE_CHECKING:
    from ledger_sync.application.commands.handlers.sync_reports_handler import (
        SyncReportsHandler,
    )
    from ledger_sync.application.queries.handlers.get_cached_reports_handler import (
        GetCachedReportsHandler,
    )


async def get_sync_reports_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "SyncReportsHandler":
    """Get SyncReports command handler (request-scoped).

    Creates handler with:
    - CredentialStore over CredentialRepository + token client
    - Report fetcher (app-scoped)
    - CacheStore and DatabaseAuditAdapter (request-scoped)
    - SyncPolicy built from settings
    """
    from ledger_sync.application.commands.handlers.sync_reports_handler import (
        SyncPolicy,
        SyncReportsHandler,
    )
    from ledger_sync.application.services.credential_store import CredentialStore
    from ledger_sync.domain.value_objects.business_calendar import BusinessCalendar
    from ledger_sync.infrastructure.audit import DatabaseAuditAdapter
    from ledger_sync.infrastructure.persistence.repositories import (
        CacheStore,
        CredentialRepository,
    )

    settings = get_settings()
    logger = get_logger()

    credential_store = CredentialStore(
        credential_repo=CredentialRepository(session=session),
        token_client=get_token_client(),
        client_credentials={
            environment: settings.client_credentials_for(environment)
            for environment in QboEnvironment
        },
        logger=logger,
        threshold_seconds=settings.token_refresh_threshold_seconds,
    )

    return SyncReportsHandler(
        credential_store=credential_store,
        report_fetcher=get_report_fetcher(),
        cache_store=CacheStore(session=session),
        audit_log=DatabaseAuditAdapter(session=session),
        logger=logger,
        policy=SyncPolicy(
            interactive_calendar=BusinessCalendar.weekdays(),
            scheduled_calendar=BusinessCalendar.with_holidays(settings.sync_holidays),
            cutoff_hour=settings.data_cutoff_hour,
            tz=settings.sync_tz,
            environment=settings.qbo_environment,
        ),
        cron_secret=settings.cron_secret,
    )


async def get_get_cached_reports_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetCachedReportsHandler":
    """Get GetCachedReports query handler (request-scoped)."""
    from ledger_sync.application.queries.handlers.get_cached_reports_handler import (
        GetCachedReportsHandler,
    )
    from ledger_sync.infrastructure.persistence.repositories import CacheStore

    return GetCachedReportsHandler(cache_store=CacheStore(session=session))
