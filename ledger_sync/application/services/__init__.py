"""Application services."""

from ledger_sync.application.services.credential_store import CredentialStore

__all__ = ["CredentialStore"]
