"""
Skill model.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, OrderMixin, OwnedMixin


class Skill(OwnedMixin, OrderMixin, Base):
    """A skill with a category and a 0-100 proficiency level."""

    __tablename__ = "portfolio_skill"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    category: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    level: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    icon: Mapped[Optional[str]] = mapped_column(String(100))
    color: Mapped[Optional[str]] = mapped_column(String(20))

    __table_args__ = (
        Index("ix_portfolio_skill_owner_deleted", "owner_id", "deleted_at"),
    )
