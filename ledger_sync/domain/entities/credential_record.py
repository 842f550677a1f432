"""Credential record entity.

One OAuth credential per remote environment. The access token, refresh token
and expiry are always replaced together; ``version`` is bumped by every
replacement so concurrent refreshes can detect each other.

Usage:
    record = CredentialRecord(
        environment=QboEnvironment.PRODUCTION,
        account_id="9130347",
        access_token="...",
        refresh_token="...",
        expires_at=1718035200,
    )
    if record.needs_refresh(now=int(time.time()), threshold_seconds=300):
        ...
"""

from dataclasses import dataclass, replace

from ledger_sync.domain.enums.qbo_environment import QboEnvironment


@dataclass(frozen=True, slots=True, kw_only=True)
class CredentialRecord:
    """OAuth credential for the remote accounting service.

    Attributes:
        environment: Sandbox or production.
        account_id: Remote company (realm) identifier.
        access_token: Short-lived bearer token.
        refresh_token: Long-lived token exchanged for a new access token.
        expires_at: Access token expiry, seconds since epoch.
        version: Optimistic-concurrency counter.
    """

    environment: QboEnvironment
    account_id: str
    access_token: str
    refresh_token: str
    expires_at: int
    version: int = 1

    def seconds_until_expiry(self, now: int) -> int:
        """Seconds left before the access token expires (negative once expired)."""
        return self.expires_at - now

    def needs_refresh(self, *, now: int, threshold_seconds: int) -> bool:
        """Check whether the access token is too close to expiry to use.

        A token with exactly ``threshold_seconds`` left is refreshed.

        Args:
            now: Current time, seconds since epoch.
            threshold_seconds: Minimum remaining lifetime to accept.

        Returns:
            bool: True if the token must be refreshed before use.
        """
        return self.seconds_until_expiry(now) <= threshold_seconds

    def with_tokens(
        self,
        *,
        access_token: str,
        refresh_token: str,
        expires_at: int,
    ) -> "CredentialRecord":
        """Return a copy carrying a new token triple and the next version."""
        return replace(
            self,
            access_token=access_token,
            refresh_token=refresh_token,
            expires_at=expires_at,
            version=self.version + 1,
        )

    def __repr__(self) -> str:
        """Representation without token material."""
        return (
            f"CredentialRecord(environment={self.environment.value!r}, "
            f"account_id={self.account_id!r}, expires_at={self.expires_at}, "
            f"version={self.version})"
        )
