"""Integration tests for QuickBooksTokenClient.

Tests cover:
- Request construction (Basic auth, form body)
- Refresh-token rotation and defaults
- Error translation to TokenRefreshError

Architecture:
- Uses pytest-httpx for HTTP mocking
"""

import base64
from urllib.parse import parse_qs

import httpx
import pytest
from pytest_httpx import HTTPXMock

from ledger_sync.core.enums import ErrorCode
from ledger_sync.core.result import Failure, Success
from ledger_sync.domain.errors import TokenRefreshError
from ledger_sync.infrastructure.providers.quickbooks.token_client import (
    QuickBooksTokenClient,
)

TOKEN_URL = "https://oauth.example.test/oauth2/v1/tokens/bearer"


@pytest.fixture
def client() -> QuickBooksTokenClient:
    return QuickBooksTokenClient(token_url=TOKEN_URL, timeout=5.0)


async def _refresh(client: QuickBooksTokenClient):
    return await client.refresh_access_token(
        refresh_token="refresh-old",
        client_id="client-id",
        client_secret="client-secret",
    )


class TestRefreshSuccess:
    async def test_request_uses_basic_auth_and_form_body(
        self, client, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_response(
            method="POST",
            url=TOKEN_URL,
            json={
                "access_token": "access-new",
                "refresh_token": "refresh-new",
                "expires_in": 3600,
                "token_type": "bearer",
            },
        )

        await _refresh(client)

        request = httpx_mock.get_request()
        expected = base64.b64encode(b"client-id:client-secret").decode()
        assert request.headers["Authorization"] == f"Basic {expected}"
        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
        form = parse_qs(request.content.decode())
        assert form == {"grant_type": ["refresh_token"], "refresh_token": ["refresh-old"]}

    async def test_returns_rotated_tokens(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="POST",
            url=TOKEN_URL,
            json={
                "access_token": "access-new",
                "refresh_token": "refresh-new",
                "expires_in": 1800,
            },
        )

        result = await _refresh(client)

        assert isinstance(result, Success)
        assert result.value.access_token == "access-new"
        assert result.value.refresh_token == "refresh-new"
        assert result.value.expires_in == 1800

    async def test_missing_refresh_token_and_expiry_use_defaults(
        self, client, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_response(method="POST", url=TOKEN_URL, json={"access_token": "a"})

        result = await _refresh(client)

        assert isinstance(result, Success)
        assert result.value.refresh_token is None
        assert result.value.expires_in == 3600

    async def test_zero_expiry_is_kept(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="POST", url=TOKEN_URL, json={"access_token": "a", "expires_in": 0}
        )

        result = await _refresh(client)

        assert isinstance(result, Success)
        assert result.value.expires_in == 0


class TestRefreshFailure:
    async def test_rejected_grant_is_permanent(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="POST",
            url=TOKEN_URL,
            status_code=400,
            json={"error": "invalid_grant"},
        )

        result = await _refresh(client)

        assert isinstance(result, Failure)
        assert isinstance(result.error, TokenRefreshError)
        assert result.error.code == ErrorCode.REFRESH_FAILED
        assert result.error.status_code == 400
        assert result.error.is_transient is False
        assert "invalid_grant" in result.error.response_body

    async def test_server_error_is_transient(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_response(method="POST", url=TOKEN_URL, status_code=503, text="down")

        result = await _refresh(client)

        assert isinstance(result, Failure)
        assert result.error.status_code == 503
        assert result.error.is_transient is True

    async def test_timeout_is_transient(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_exception(httpx.ReadTimeout("timed out"), url=TOKEN_URL)

        result = await _refresh(client)

        assert isinstance(result, Failure)
        assert result.error.status_code is None
        assert result.error.is_transient is True

    async def test_invalid_json(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_response(method="POST", url=TOKEN_URL, text="<html>oops</html>")

        result = await _refresh(client)

        assert isinstance(result, Failure)
        assert result.error.message == "Token endpoint returned invalid JSON"

    async def test_missing_access_token(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_response(method="POST", url=TOKEN_URL, json={"expires_in": 3600})

        result = await _refresh(client)

        assert isinstance(result, Failure)
        assert "access_token" in result.error.message

    @pytest.mark.parametrize(
        "payload",
        [
            {"access_token": "a", "expires_in": "soon"},
            {"access_token": "a", "expires_in": 3600.5},
            {"access_token": "a", "expires_in": True},
            {"access_token": ["a"], "expires_in": 3600},
            {"access_token": "a", "refresh_token": 42},
        ],
    )
    async def test_malformed_fields(self, client, httpx_mock: HTTPXMock, payload):
        httpx_mock.add_response(method="POST", url=TOKEN_URL, json=payload)

        result = await _refresh(client)

        assert isinstance(result, Failure)
        assert isinstance(result.error, TokenRefreshError)
        assert result.error.code == ErrorCode.REFRESH_FAILED
        assert result.error.status_code == 200
        assert result.error.is_transient is False
