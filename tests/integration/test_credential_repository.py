"""Integration tests for CredentialRepository.

Tests cover:
- Lookup by environment (present, absent)
- Version-checked token replacement
"""

from dataclasses import replace

import pytest_asyncio

from ledger_sync.core.enums import ErrorCode
from ledger_sync.core.result import Failure, Success
from ledger_sync.domain.enums.qbo_environment import QboEnvironment
from ledger_sync.domain.errors import ConcurrentUpdateError
from ledger_sync.infrastructure.persistence.models.ledger_credential import (
    LedgerCredential,
)
from ledger_sync.infrastructure.persistence.repositories.credential_repository import (
    CredentialRepository,
)
from tests.utils.factories import NOW_TS


@pytest_asyncio.fixture
async def connected(database):
    """Database holding a production credential at version 1."""
    async with database.get_session() as session:
        session.add(
            LedgerCredential(
                environment="production",
                account_id="9130347",
                access_token="access-old",
                refresh_token="refresh-old",
                expires_at=NOW_TS + 3600,
                version=1,
            )
        )
    return database


async def _find(database, environment: QboEnvironment):
    async with database.get_session() as session:
        return await CredentialRepository(session).find_by_environment(environment)


async def _replace(database, record, expected_version: int):
    async with database.get_session() as session:
        return await CredentialRepository(session).replace_tokens(
            record, expected_version=expected_version
        )


class TestFindByEnvironment:
    async def test_found(self, connected):
        result = await _find(connected, QboEnvironment.PRODUCTION)

        assert isinstance(result, Success)
        record = result.value
        assert record.environment == QboEnvironment.PRODUCTION
        assert record.account_id == "9130347"
        assert record.access_token == "access-old"
        assert record.refresh_token == "refresh-old"
        assert record.expires_at == NOW_TS + 3600
        assert record.version == 1

    async def test_other_environment_not_connected(self, connected):
        result = await _find(connected, QboEnvironment.SANDBOX)

        assert isinstance(result, Success)
        assert result.value is None


class TestReplaceTokens:
    async def test_replaces_all_three_fields(self, connected):
        current = (await _find(connected, QboEnvironment.PRODUCTION)).value
        refreshed = replace(
            current,
            access_token="access-new",
            refresh_token="refresh-new",
            expires_at=NOW_TS + 7200,
            version=2,
        )

        result = await _replace(connected, refreshed, 1)
        stored = (await _find(connected, QboEnvironment.PRODUCTION)).value

        assert isinstance(result, Success)
        assert stored.access_token == "access-new"
        assert stored.refresh_token == "refresh-new"
        assert stored.expires_at == NOW_TS + 7200
        assert stored.version == 2

    async def test_stale_version_conflicts(self, connected):
        current = (await _find(connected, QboEnvironment.PRODUCTION)).value
        await _replace(connected, replace(current, access_token="first", version=2), 1)

        result = await _replace(
            connected, replace(current, access_token="second", version=2), 1
        )
        stored = (await _find(connected, QboEnvironment.PRODUCTION)).value

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConcurrentUpdateError)
        assert result.error.code == ErrorCode.CONCURRENT_UPDATE
        assert result.error.resource_type == "credential"
        assert stored.access_token == "first"
