"""API tests for GET /api/v1/reports/{period}.

Architecture:
- Uses FastAPI TestClient with real app + dependency overrides
- Mocks the query handler; JWTs are real
"""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from ledger_sync.core.container import get_get_cached_reports_handler, get_token_service
from ledger_sync.core.enums import ErrorCode
from ledger_sync.core.errors import NotFoundError
from ledger_sync.core.result import Failure, Success
from ledger_sync.main import app
from tests.utils.factories import create_cache_entry, report


class MockGetCachedReportsHandler:
    def __init__(self, result: Any) -> None:
        self._result = result
        self.queries: list[Any] = []

    async def handle(self, query: Any) -> Any:
        self.queries.append(query)
        return self._result


@pytest.fixture
def client():
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def use_handler():
    def _install(result: Any) -> MockGetCachedReportsHandler:
        handler = MockGetCachedReportsHandler(result)
        app.dependency_overrides[get_get_cached_reports_handler] = lambda: handler
        return handler

    yield _install
    app.dependency_overrides.pop(get_get_cached_reports_handler, None)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    token = get_token_service().generate_access_token("user-1")
    return {"Authorization": f"Bearer {token}"}


class TestGetCachedReports:
    def test_returns_cached_bundle(self, client, use_handler, auth_headers):
        handler = use_handler(Success(value=create_cache_entry()))

        response = client.get("/api/v1/reports/2024", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["period"] == 2024
        assert body["lastSyncTimestamp"] == "2024-06-10T17:30:00Z"
        assert body["dailyReport"] == report("ProfitAndLoss")
        assert body["balanceSheetReport"] == report("BalanceSheet")
        assert body["trackedAccounts"]["Allen"] == {
            "accountId": "88",
            "accountName": "Equity:Dr Allen:3920 Retirement Contributions",
        }
        assert set(body["auxiliaryLedgerData"]) == {"Allen", "Baker"}
        assert body["syncedBy"] == "user-1"
        assert handler.queries[0].period == 2024

    def test_never_synced_period(self, client, use_handler, auth_headers):
        use_handler(
            Failure(
                error=NotFoundError(
                    code=ErrorCode.NO_CACHED_DATA,
                    message="No cached data for 2022. Run a sync first.",
                    resource_type="cache_entry",
                    resource_id="2022",
                )
            )
        )

        response = client.get("/api/v1/reports/2022", headers=auth_headers)

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "no_cached_data"
        assert body["details"] == {"resource_type": "cache_entry", "resource_id": "2022"}

    def test_requires_user_token(self, client, use_handler):
        handler = use_handler(Success(value=create_cache_entry()))

        response = client.get("/api/v1/reports/2024")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json() == {
            "error": "unauthorized",
            "message": "Authentication required",
        }
        assert handler.queries == []

    def test_cron_secret_is_not_a_user(self, client, use_handler):
        use_handler(Success(value=create_cache_entry()))

        response = client.get(
            "/api/v1/reports/2024",
            headers={"Authorization": "Bearer test-cron-secret"},
        )

        assert response.status_code == 401

    def test_period_out_of_range(self, client, use_handler, auth_headers):
        use_handler(Success(value=create_cache_entry()))

        response = client.get("/api/v1/reports/1850", headers=auth_headers)

        assert response.status_code == 422
        assert response.json()["details"]["errors"][0]["field"] == "period"
