"""Error returned when any call of a report bundle fetch fails."""

from dataclasses import dataclass

from ledger_sync.core.errors import DomainError
from ledger_sync.domain.enums.fetch_step import FetchStep


@dataclass(frozen=True, slots=True, kw_only=True)
class ReportFetchError(DomainError):
    """A report request failed; the whole bundle is discarded.

    Attributes:
        step: Which remote call failed.
        status_code: HTTP status (None on timeout/connection failure).
        response_body: Raw (truncated) response body.
        is_transient: Whether retrying later may succeed.
    """

    step: FetchStep
    status_code: int | None = None
    response_body: str | None = None
    is_transient: bool = False
