"""
Base class and mixins for all SQLAlchemy ORM models.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Timezone-aware current time."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class OwnedMixin:
    """
    Mixin for rows that belong to one owner and support soft deletion.

    Fields added:
    - id: UUID4 string assigned on insert
    - owner_id: Opaque identifier of the owning user (immutable)
    - created_at, updated_at: Maintained by the store
    - deleted_at: Soft delete marker (None = active)

    Methods:
    - soft_delete(): Mark entity as deleted
    - restore(): Clear the deletion marker
    """

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    owner_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def soft_delete(self) -> None:
        """Set the deletion marker. No other field changes."""
        self.deleted_at = utcnow()

    def restore(self) -> None:
        """Clear the deletion marker."""
        self.deleted_at = None

    def __repr__(self) -> str:
        class_name = self.__class__.__name__
        state = "deleted" if self.is_deleted else "active"
        return f"<{class_name}(id={self.id}, {state})>"


class OrderMixin:
    """Explicit display position for orderable collections (0 = first)."""

    order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
