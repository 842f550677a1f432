"""Unit tests for Settings validation and helpers."""

import pytest
from pydantic import ValidationError

from ledger_sync.core.config import Settings
from ledger_sync.domain.enums.qbo_environment import QboEnvironment

REQUIRED = {
    "database_url": "sqlite+aiosqlite:///:memory:",
    "secret_key": "x" * 32,
}


def make_settings(**overrides) -> Settings:
    return Settings(**{**REQUIRED, **overrides})


class TestValidation:
    def test_cutoff_hour_range(self):
        with pytest.raises(ValidationError):
            make_settings(data_cutoff_hour=24)

    def test_unknown_timezone_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(sync_timezone="Mars/Olympus_Mons")

    def test_urls_lose_trailing_slash(self):
        settings = make_settings(qbo_sandbox_base_url="https://sandbox.example.test/")

        assert settings.qbo_sandbox_base_url == "https://sandbox.example.test"


class TestHelpers:
    def test_client_credentials_per_environment(self):
        settings = make_settings(
            qbo_sandbox_client_id="sid",
            qbo_sandbox_client_secret="ssecret",
            qbo_production_client_id="pid",
            qbo_production_client_secret=None,
        )

        assert settings.client_credentials_for(QboEnvironment.SANDBOX) == ("sid", "ssecret")
        assert settings.client_credentials_for(QboEnvironment.PRODUCTION) == ("pid", None)

    def test_api_base_url_per_environment(self):
        settings = make_settings()

        assert "sandbox" in settings.api_base_url_for(QboEnvironment.SANDBOX)
        assert settings.api_base_url_for(QboEnvironment.PRODUCTION) == (
            "https://quickbooks.api.intuit.com"
        )

    def test_sync_tz(self):
        settings = make_settings(sync_timezone="America/New_York")

        assert settings.sync_tz.key == "America/New_York"
