"""Report queries (CQRS read operations).

Reads never contact the remote service; they only return what the last
successful sync committed.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetCachedReports:
    """Get the cached report bundle of a period.

    Attributes:
        period: Calendar year to read.
    """

    period: int
