"""SQLAlchemy persistence: engine/session management, models, repositories."""

from ledger_sync.infrastructure.persistence.base import (
    BaseModel,
    BaseMutableModel,
    TimestampMixin,
)
from ledger_sync.infrastructure.persistence.database import Database

__all__ = ["BaseModel", "BaseMutableModel", "Database", "TimestampMixin"]
