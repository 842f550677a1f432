"""Declarative base for the sync tables.

- BaseModel: id + created_at; used as is by the append-only audit log
- BaseMutableModel: adds updated_at for rows replaced in place
  (credentials, cache entries)

Ids are UUIDv7 so rows sort by insertion time. Constraint and index names
follow ``NAMING_CONVENTION`` so Alembic migrations can refer to them.

Domain entities never inherit from these; repositories map between the two.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, MetaData, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "pk": "pk_%(table_name)s",
}


class BaseModel(DeclarativeBase):
    """Base class for all database models."""

    __abstract__ = True

    metadata = MetaData(naming_convention=NAMING_CONVENTION)

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid7)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id})>"


class TimestampMixin:
    """Adds updated_at, refreshed on every UPDATE."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base for rows that are updated after insert."""

    __abstract__ = True
