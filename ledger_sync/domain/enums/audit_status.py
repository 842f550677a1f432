"""Outcome recorded in the sync audit log."""

from enum import Enum


class AuditStatus(str, Enum):
    """Outcome of one scheduled sync invocation."""

    SUCCESS = "success"
    SKIPPED = "skipped"
    ERROR = "error"
