"""Identity on whose behalf a sync runs."""

from dataclasses import dataclass

from ledger_sync.core.constants import SCHEDULED_CALLER_ID


@dataclass(frozen=True, slots=True, kw_only=True)
class Caller:
    """Authenticated caller.

    Attributes:
        id: User identifier, or ``"scheduler"`` for scheduled runs.
        is_admin: Admin users may bypass the sync gate.
        is_scheduled: True only for the synthetic scheduled identity.
    """

    id: str
    is_admin: bool = False
    is_scheduled: bool = False

    @classmethod
    def scheduled(cls) -> "Caller":
        """Synthetic identity used when the cron secret is presented."""
        return cls(id=SCHEDULED_CALLER_ID, is_admin=False, is_scheduled=True)
