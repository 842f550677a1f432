"""Repository implementations (SQLAlchemy adapters for domain ports)."""

from ledger_sync.infrastructure.persistence.repositories.cache_store import CacheStore
from ledger_sync.infrastructure.persistence.repositories.credential_repository import (
    CredentialRepository,
)

__all__ = ["CacheStore", "CredentialRepository"]
