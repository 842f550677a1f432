"""Remote accounting service adapter factories (app-scoped singletons)."""

from functools import lru_cache
from typing import TYPE_CHECKING

from ledger_sync.core.config import get_settings
from ledger_sync.domain.enums.qbo_environment import QboEnvironment

if TYPE_CHECKING:
    from ledger_sync.infrastructure.providers.quickbooks import (
        QuickBooksReportFetcher,
        QuickBooksTokenClient,
    )


@lru_cache()
def get_token_client() -> "QuickBooksTokenClient":
    """Get OAuth token client singleton."""
    from ledger_sync.infrastructure.providers.quickbooks import QuickBooksTokenClient

    settings = get_settings()
    return QuickBooksTokenClient(
        token_url=settings.qbo_token_url,
        timeout=settings.provider_timeout,
    )


@lru_cache()
def get_report_fetcher() -> "QuickBooksReportFetcher":
    """Get report fetcher singleton.

    Stateless: each fetch opens its own HTTP client.
    """
    from ledger_sync.infrastructure.providers.quickbooks import QuickBooksReportFetcher

    settings = get_settings()
    return QuickBooksReportFetcher(
        base_urls={
            environment: settings.api_base_url_for(environment)
            for environment in QboEnvironment
        },
        timeout=settings.provider_timeout,
        track_sub_accounts=settings.track_sub_accounts,
        sub_account_name_pattern=settings.sub_account_name_pattern,
        sub_account_owners=settings.sub_account_owners,
    )
