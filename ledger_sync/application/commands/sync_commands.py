"""Sync commands.

Commands that refresh the report cache from the remote accounting service.
These are blocking operations: the handler runs the whole sync before the
request returns.
"""

from dataclasses import dataclass

from ledger_sync.domain.entities.caller import Caller


@dataclass(frozen=True, kw_only=True)
class SyncReports:
    """Command to sync the report bundle of one period.

    Attributes:
        period: Calendar year to sync.
        caller: Caller resolved from a user token (None if none was valid).
        presented_secret: Bearer value presented with the request; a match
            with the cron secret makes this a scheduled invocation.
        force: Scheduled invocations only; bypass the gate.
    """

    period: int
    caller: Caller | None = None
    presented_secret: str | None = None
    force: bool = False
