"""Centralized constants for internal implementation details.

These are NOT environment-specific configuration. Anything an operator may
need to change lives in ``ledger_sync/core/config.py``; the values here are
defaults and protocol details of the remote accounting API.

Example:
    >>> from ledger_sync.core.constants import BEARER_PREFIX
    >>> header = f"{BEARER_PREFIX}{access_token}"
"""

from datetime import date

# =============================================================================
# Timeouts
# =============================================================================

PROVIDER_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for remote accounting API calls in seconds."""


# =============================================================================
# Credential lifecycle
# =============================================================================

TOKEN_REFRESH_THRESHOLD_SECONDS_DEFAULT: int = 300
"""Refresh the access token when it expires within this many seconds."""

TOKEN_EXPIRES_IN_DEFAULT: int = 3600
"""Lifetime assumed when the token endpoint omits ``expires_in``."""


# =============================================================================
# Sync gate
# =============================================================================

DATA_CUTOFF_HOUR_DEFAULT: int = 17
"""Local hour at/after which the current day's data counts as settled."""

SCHEDULED_CALLER_ID: str = "scheduler"
"""Identifier of the synthetic caller used for scheduled (cron) runs."""

US_FEDERAL_HOLIDAYS: tuple[date, ...] = (
    # 2024
    date(2024, 1, 1),
    date(2024, 1, 15),
    date(2024, 2, 19),
    date(2024, 5, 27),
    date(2024, 6, 19),
    date(2024, 7, 4),
    date(2024, 9, 2),
    date(2024, 10, 14),
    date(2024, 11, 11),
    date(2024, 11, 28),
    date(2024, 12, 25),
    # 2025
    date(2025, 1, 1),
    date(2025, 1, 20),
    date(2025, 2, 17),
    date(2025, 5, 26),
    date(2025, 6, 19),
    date(2025, 7, 4),
    date(2025, 9, 1),
    date(2025, 10, 13),
    date(2025, 11, 11),
    date(2025, 11, 27),
    date(2025, 12, 25),
    # 2026
    date(2026, 1, 1),
    date(2026, 1, 19),
    date(2026, 2, 16),
    date(2026, 5, 25),
    date(2026, 6, 19),
    date(2026, 7, 3),
    date(2026, 9, 7),
    date(2026, 10, 12),
    date(2026, 11, 11),
    date(2026, 11, 26),
    date(2026, 12, 25),
)
"""Default holiday calendar observed by scheduled runs."""


# =============================================================================
# Remote accounting API
# =============================================================================

QBO_MINOR_VERSION: str = "75"
"""``minorversion`` query parameter sent with every report request."""

BEARER_PREFIX: str = "Bearer "
"""HTTP Authorization header prefix for Bearer tokens."""

SUB_ACCOUNT_DISCOVERY_QUERY: str = (
    "select Id, FullyQualifiedName from Account where AccountType = 'Equity'"
)
"""Query used to discover tracked equity sub-accounts."""

SUB_LEDGER_COLUMNS: str = "account_name,subt_nat_amount,memo,txn_type"
"""Columns requested for each sub-ledger (GeneralLedger) report."""


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 2000
"""Maximum length of a remote response body kept in error details."""
