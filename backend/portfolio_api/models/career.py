"""
Career models: Company, Experience, Education, Certification.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import JSON, Boolean, Date, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, OwnedMixin


class Company(OwnedMixin, Base):
    """A company the owner worked for or with."""

    __tablename__ = "portfolio_company"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    logo: Mapped[Optional[str]] = mapped_column(Text)
    website: Mapped[Optional[str]] = mapped_column(Text)
    description: Mapped[Optional[str]] = mapped_column(Text)
    industry: Mapped[Optional[str]] = mapped_column(String(100))
    location: Mapped[Optional[str]] = mapped_column(String(100))
    founded_year: Mapped[Optional[int]] = mapped_column(Integer)

    __table_args__ = (
        Index("ix_portfolio_company_owner_deleted", "owner_id", "deleted_at"),
    )


class Experience(OwnedMixin, Base):
    """
    A work experience entry.

    company_id is a weak reference: no foreign key, resolved at read time
    among the owner's active companies. Deleting a company leaves it dangling.
    """

    __tablename__ = "portfolio_experience"

    company_id: Mapped[Optional[str]] = mapped_column(String(36))
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    company: Mapped[Optional[str]] = mapped_column(String(100))
    location: Mapped[Optional[str]] = mapped_column(String(100))
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[Optional[date]] = mapped_column(Date)
    current: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    achievements: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    technologies: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)

    __table_args__ = (
        Index("ix_portfolio_experience_owner_deleted", "owner_id", "deleted_at"),
    )


class Education(OwnedMixin, Base):
    """An education entry."""

    __tablename__ = "portfolio_education"

    institution: Mapped[str] = mapped_column(String(200), nullable=False)
    degree: Mapped[str] = mapped_column(String(200), nullable=False)
    field: Mapped[Optional[str]] = mapped_column(String(200))
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[Optional[date]] = mapped_column(Date)
    gpa: Mapped[Optional[str]] = mapped_column(String(20))
    description: Mapped[Optional[str]] = mapped_column(Text)

    __table_args__ = (
        Index("ix_portfolio_education_owner_deleted", "owner_id", "deleted_at"),
    )


class Certification(OwnedMixin, Base):
    """A professional certification. Status is derived from expiry_date on read."""

    __tablename__ = "portfolio_certification"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    issuer: Mapped[str] = mapped_column(String(200), nullable=False)
    issue_date: Mapped[date] = mapped_column(Date, nullable=False)
    expiry_date: Mapped[Optional[date]] = mapped_column(Date)
    credential_id: Mapped[Optional[str]] = mapped_column(String(200))
    credential_url: Mapped[Optional[str]] = mapped_column(Text)

    __table_args__ = (
        Index("ix_portfolio_certification_owner_deleted", "owner_id", "deleted_at"),
    )
