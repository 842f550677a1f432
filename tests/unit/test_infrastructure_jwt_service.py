"""Unit tests for JWTService caller resolution."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from freezegun import freeze_time

from ledger_sync.domain.entities.caller import Caller
from ledger_sync.infrastructure.security.jwt_service import JWTService

SECRET = "a" * 32


@pytest.fixture
def service() -> JWTService:
    return JWTService(secret_key=SECRET)


class TestConstruction:
    def test_rejects_short_secret(self):
        with pytest.raises(ValueError, match="at least 32 bytes"):
            JWTService(secret_key="too-short")


class TestResolveCaller:
    """Token validation and claim mapping."""

    def test_user_token(self, service):
        token = service.generate_access_token("user-1")

        assert service.resolve_caller(token) == Caller(id="user-1")

    def test_admin_token(self, service):
        token = service.generate_access_token("admin-1", is_admin=True)

        caller = service.resolve_caller(token)

        assert caller is not None
        assert caller.is_admin is True
        assert caller.is_scheduled is False

    def test_admin_claim_must_be_boolean_true(self, service):
        token = jwt.encode({"sub": "user-1", "is_admin": "true"}, SECRET, algorithm="HS256")

        caller = service.resolve_caller(token)

        assert caller == Caller(id="user-1", is_admin=False)

    def test_missing_subject_is_anonymous(self, service):
        token = jwt.encode({"is_admin": True}, SECRET, algorithm="HS256")

        assert service.resolve_caller(token) is None

    def test_wrong_signature_is_anonymous(self, service):
        token = jwt.encode({"sub": "user-1"}, "b" * 32, algorithm="HS256")

        assert service.resolve_caller(token) is None

    def test_garbage_is_anonymous(self, service):
        assert service.resolve_caller("test-cron-secret") is None

    def test_expired_token_is_anonymous(self, service):
        with freeze_time("2024-01-01 12:00:00"):
            token = service.generate_access_token("user-1")

        with freeze_time("2024-01-01 12:16:00"):
            assert service.resolve_caller(token) is None

    def test_token_valid_until_expiry(self, service):
        with freeze_time("2024-01-01 12:00:00"):
            token = service.generate_access_token("user-1")

        with freeze_time("2024-01-01 12:14:00"):
            assert service.resolve_caller(token) == Caller(id="user-1")

    def test_generated_claims(self, service):
        with freeze_time("2024-01-01 12:00:00"):
            token = service.generate_access_token("user-1", is_admin=True)

        payload = jwt.decode(token, SECRET, algorithms=["HS256"], options={"verify_exp": False})
        issued = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
        assert payload["sub"] == "user-1"
        assert payload["is_admin"] is True
        assert payload["iat"] == int(issued.timestamp())
        assert payload["exp"] == int((issued + timedelta(minutes=15)).timestamp())
        assert payload["jti"]
