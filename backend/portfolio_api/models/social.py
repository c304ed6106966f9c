"""
Social models: Testimonial, Contact.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Boolean, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, OrderMixin, OwnedMixin


class Testimonial(OwnedMixin, OrderMixin, Base):
    """A testimonial with a 1-5 rating."""

    __tablename__ = "portfolio_testimonial"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    role: Mapped[Optional[str]] = mapped_column(String(100))
    company: Mapped[Optional[str]] = mapped_column(String(100))
    content: Mapped[str] = mapped_column(Text, nullable=False)
    avatar: Mapped[Optional[str]] = mapped_column(Text)
    rating: Mapped[int] = mapped_column(Integer, default=5, nullable=False)
    featured: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    __table_args__ = (
        Index("ix_portfolio_testimonial_owner_deleted", "owner_id", "deleted_at"),
    )


class Contact(OwnedMixin, OrderMixin, Base):
    """A contact link (platform + url)."""

    __tablename__ = "portfolio_contact"

    platform: Mapped[str] = mapped_column(String(50), nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    icon: Mapped[Optional[str]] = mapped_column(String(100))
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    __table_args__ = (
        Index("ix_portfolio_contact_owner_deleted", "owner_id", "deleted_at"),
    )
