"""Runtime settings for the sync service, read from environment variables.

One flat model covering the database, caller authentication, the two
QuickBooks environments and the sync policy.

- Remote client secrets are optional at load time; a missing pair is
  reported as a ConfigurationError when a token refresh needs it

Usage:
    from ledger_sync.core.config import get_settings

    settings = get_settings()
    threshold = settings.token_refresh_threshold_seconds
    base_url = settings.api_base_url_for(QboEnvironment.SANDBOX)
"""

from datetime import date
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ledger_sync.core.constants import (
    DATA_CUTOFF_HOUR_DEFAULT,
    PROVIDER_TIMEOUT_DEFAULT,
    TOKEN_REFRESH_THRESHOLD_SECONDS_DEFAULT,
    US_FEDERAL_HOLIDAYS,
)
from ledger_sync.core.enums import Environment
from ledger_sync.domain.enums.qbo_environment import QboEnvironment


class Settings(BaseSettings):
    """Flat settings model; secrets have no defaults."""

    # Runtime
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Deployment environment; development gets colored console logs",
    )
    debug: bool = Field(
        default=False,
        description="Expose unexpected exception messages in 500 responses",
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum structlog level name",
    )

    # Service metadata
    app_name: str = Field(
        default="Ledger Sync",
        description="Service name shown at the root route",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Service version",
    )
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="Prefix for the versioned API routers",
    )

    # Database configuration
    database_url: str = Field(
        description="Async SQLAlchemy URL holding credentials, cache and audit tables",
    )
    db_echo: bool = Field(
        default=False,
        description="Echo SQL statements",
    )

    # Caller authentication
    secret_key: str = Field(
        description="Secret key used to verify dashboard user JWTs",
    )
    algorithm: str = Field(
        default="HS256",
        description="JWT signing algorithm",
    )
    cron_secret: str | None = Field(
        default=None,
        description="Shared secret presented as a Bearer token by the scheduler",
    )

    # Remote accounting service
    qbo_environment: QboEnvironment = Field(
        default=QboEnvironment.PRODUCTION,
        description="Which stored credential (sandbox or production) syncs use",
    )
    qbo_sandbox_client_id: str | None = Field(
        default=None,
        description="OAuth client ID for the sandbox environment",
    )
    qbo_sandbox_client_secret: str | None = Field(
        default=None,
        description="OAuth client secret for the sandbox environment",
    )
    qbo_production_client_id: str | None = Field(
        default=None,
        description="OAuth client ID for the production environment",
    )
    qbo_production_client_secret: str | None = Field(
        default=None,
        description="OAuth client secret for the production environment",
    )
    qbo_token_url: str = Field(
        default="https://oauth.platform.intuit.com/oauth2/v1/tokens/bearer",
        description="OAuth2 token endpoint",
    )
    qbo_sandbox_base_url: str = Field(
        default="https://sandbox-quickbooks.api.intuit.com",
        description="Accounting API base URL for the sandbox environment",
    )
    qbo_production_base_url: str = Field(
        default="https://quickbooks.api.intuit.com",
        description="Accounting API base URL for the production environment",
    )
    provider_timeout: float = Field(
        default=PROVIDER_TIMEOUT_DEFAULT,
        description="Timeout in seconds for each remote HTTP call",
    )

    # Sync policy
    token_refresh_threshold_seconds: int = Field(
        default=TOKEN_REFRESH_THRESHOLD_SECONDS_DEFAULT,
        description="Refresh the access token when it expires within this many seconds",
    )
    data_cutoff_hour: int = Field(
        default=DATA_CUTOFF_HOUR_DEFAULT,
        description="Local hour at which the current day's data counts as settled",
    )
    sync_timezone: str = Field(
        default="UTC",
        description="IANA timezone the cutoff hour and business days are evaluated in",
    )
    sync_holidays: list[date] = Field(
        default_factory=lambda: list(US_FEDERAL_HOLIDAYS),
        description="Holidays skipped by scheduled runs (JSON list of ISO dates)",
    )

    # Sub-account tracking
    track_sub_accounts: bool = Field(
        default=True,
        description="Discover tracked equity sub-accounts and fetch their ledgers",
    )
    sub_account_name_pattern: str = Field(
        default="Retirement Contribution",
        description="Case-insensitive regex matched against the account's last name segment",
    )
    sub_account_owners: list[str] = Field(
        default_factory=list,
        description="Owner names to track (empty = every owner that can be extracted)",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("qbo_token_url", "qbo_sandbox_base_url", "qbo_production_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Strip trailing slashes so paths can be appended with one."""
        return v.rstrip("/")

    @field_validator("data_cutoff_hour")
    @classmethod
    def check_hour_of_day(cls, v: int) -> int:
        if not 0 <= v <= 23:
            raise ValueError("data_cutoff_hour must be between 0 and 23")
        return v

    @field_validator("sync_timezone")
    @classmethod
    def check_timezone_exists(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v

    @property
    def sync_tz(self) -> ZoneInfo:
        """Timezone used by the sync gate."""
        return ZoneInfo(self.sync_timezone)

    def client_credentials_for(
        self, environment: QboEnvironment
    ) -> tuple[str | None, str | None]:
        """
        Return the OAuth client ID and secret for a remote environment.

        Args:
            environment: Remote environment of the credential being refreshed.

        Returns:
            tuple: (client_id, client_secret); either may be None when unset.
        """
        if environment == QboEnvironment.SANDBOX:
            return self.qbo_sandbox_client_id, self.qbo_sandbox_client_secret
        return self.qbo_production_client_id, self.qbo_production_client_secret

    def api_base_url_for(self, environment: QboEnvironment) -> str:
        """
        Return the accounting API base URL for a remote environment.

        Args:
            environment: Remote environment of the credential in use.

        Returns:
            str: Base URL without trailing slash.
        """
        if environment == QboEnvironment.SANDBOX:
            return self.qbo_sandbox_base_url
        return self.qbo_production_base_url

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT


@lru_cache
def get_settings() -> Settings:
    """Settings loaded once per process from the environment."""
    return Settings()  # type: ignore[call-arg]  # Pydantic Settings loads from env
