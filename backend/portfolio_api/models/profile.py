"""
Profile model: one row per owner holding presentation settings and
section visibility flags.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, new_id, utcnow


class Profile(Base):
    """Singleton per owner. Not soft-deletable."""

    __tablename__ = "portfolio_profile"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    owner_id: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    bio: Mapped[Optional[str]] = mapped_column(Text)
    avatar: Mapped[Optional[str]] = mapped_column(Text)
    resume_url: Mapped[Optional[str]] = mapped_column(Text)
    location: Mapped[Optional[str]] = mapped_column(String(100))
    available_for_hire: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    portfolio_url: Mapped[Optional[str]] = mapped_column(Text)
    theme: Mapped[str] = mapped_column(String(50), default="default", nullable=False)

    # Public visibility
    is_public: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    show_projects: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    show_companies: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    show_skills: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    show_experiences: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    show_education: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    show_certifications: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    show_blog: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    show_testimonials: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    show_contacts: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<Profile(owner_id={self.owner_id}, public={self.is_public})>"
