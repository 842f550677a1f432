"""Caller authentication adapters."""

from ledger_sync.infrastructure.security.jwt_service import JWTService

__all__ = ["JWTService"]
