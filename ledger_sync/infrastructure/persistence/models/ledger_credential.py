"""Ledger credential database model.

One row per remote environment. Tokens are replaced by a single conditional
UPDATE on ``version`` (see CredentialRepository.replace_tokens).
"""

from sqlalchemy import BigInteger, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ledger_sync.infrastructure.persistence.base import BaseMutableModel


class LedgerCredential(BaseMutableModel):
    """OAuth credential for the remote accounting service.

    Fields:
        id, created_at, updated_at: from BaseMutableModel
        environment: "sandbox" or "production" (unique)
        account_id: Remote company (realm) id
        access_token: Bearer token
        refresh_token: Refresh token
        expires_at: Access token expiry (epoch seconds)
        version: Optimistic-concurrency counter
    """

    __tablename__ = "ledger_credentials"

    environment: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        unique=True,
        index=True,
        comment="Remote environment (sandbox, production)",
    )

    account_id: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        comment="Remote company (realm) identifier",
    )

    access_token: Mapped[str] = mapped_column(Text, nullable=False)

    refresh_token: Mapped[str] = mapped_column(Text, nullable=False)

    expires_at: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        comment="Access token expiry, seconds since epoch",
    )

    version: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=1,
        comment="Bumped on every token replacement",
    )

    def __repr__(self) -> str:
        return (
            f"<LedgerCredential(environment={self.environment!r}, "
            f"version={self.version})>"
        )
