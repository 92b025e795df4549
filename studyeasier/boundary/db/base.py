"""
SQLAlchemy declarative base and common mixins.

Provides base class for all ORM models and the reusable mixin for
document-style records (string id, JSON payload, storage timestamp).

Dependencies: sqlalchemy
System role: Foundation for all local store models
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for ORM model registration.

    All local store models inherit from this class to ensure they're
    registered with the metadata and included in table creation.
    """

    pass


class RecordMixin:
    """
    Mixin for whole-record storage keyed by the record's own id.

    The full entity is kept as a JSON document so a put always replaces the
    record wholesale and never partially writes it.

    Attributes:
        id: Entity identifier (primary key, client-generated)
        data: JSON document of the entity
        stored_at: Last time this row was written (UTC)
    """

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    data: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    stored_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
