"""
Centralized constants for the backend application.
Avoid magic strings and repeated constants.

Usage:
    from shared.config.constants import SkillCategory, Limits, Collections

    if category not in SkillCategory.ALL:
        ...
"""

from typing import Final


# =============================================================================
# Portfolio collections
# =============================================================================


class Collections:
    """Collection keys used by routers, the public API and account cleanup."""

    PROJECTS: Final[str] = "projects"
    EXPERIENCES: Final[str] = "experiences"
    EDUCATION: Final[str] = "education"
    SKILLS: Final[str] = "skills"
    CERTIFICATIONS: Final[str] = "certifications"
    BLOG: Final[str] = "blog"
    TESTIMONIALS: Final[str] = "testimonials"
    COMPANIES: Final[str] = "companies"
    CONTACTS: Final[str] = "contacts"
    PROFILE: Final[str] = "profile"

    ALL: Final[list[str]] = [
        PROJECTS,
        EXPERIENCES,
        EDUCATION,
        SKILLS,
        CERTIFICATIONS,
        BLOG,
        TESTIMONIALS,
        COMPANIES,
        CONTACTS,
    ]


# Profile flag that controls each collection on the public surface
VISIBILITY_FLAGS: Final[dict[str, str]] = {
    Collections.PROJECTS: "show_projects",
    Collections.EXPERIENCES: "show_experiences",
    Collections.EDUCATION: "show_education",
    Collections.SKILLS: "show_skills",
    Collections.CERTIFICATIONS: "show_certifications",
    Collections.BLOG: "show_blog",
    Collections.TESTIMONIALS: "show_testimonials",
    Collections.COMPANIES: "show_companies",
    Collections.CONTACTS: "show_contacts",
}


# =============================================================================
# Entity value sets
# =============================================================================


class SkillCategory:
    """Allowed skill categories."""

    FRONTEND: Final[str] = "Frontend"
    BACKEND: Final[str] = "Backend"
    DATABASE: Final[str] = "Database"
    DEVOPS: Final[str] = "DevOps"
    MOBILE: Final[str] = "Mobile"
    DESIGN: Final[str] = "Design"
    TOOLS: Final[str] = "Tools"
    OTHER: Final[str] = "Other"

    ALL: Final[list[str]] = [FRONTEND, BACKEND, DATABASE, DEVOPS, MOBILE, DESIGN, TOOLS, OTHER]


class CertificationStatus:
    """Derived certification status labels."""

    VALID: Final[str] = "Valid"
    EXPIRED: Final[str] = "Expired"
    EXPIRING_SOON: Final[str] = "Expiring Soon"
    NO_EXPIRY: Final[str] = "No Expiry"


# =============================================================================
# Validation limits
# =============================================================================


class Limits:
    """Validation limits."""

    # Testimonial rating (closed range)
    MIN_RATING: Final[int] = 1
    MAX_RATING: Final[int] = 5

    # Skill level (percentage)
    MIN_SKILL_LEVEL: Final[int] = 0
    MAX_SKILL_LEVEL: Final[int] = 100

    # Certification expiry warning window
    EXPIRING_SOON_DAYS: Final[int] = 30

    # String lengths
    MAX_TITLE_LENGTH: Final[int] = 200
    MAX_NAME_LENGTH: Final[int] = 100
    MAX_SLUG_LENGTH: Final[int] = 200
    MAX_EXCERPT_LENGTH: Final[int] = 500
    MAX_BIO_LENGTH: Final[int] = 1000
    MAX_DESCRIPTION_LENGTH: Final[int] = 5000
    MAX_URL_LENGTH: Final[int] = 2048

    # Bulk operations
    MAX_BULK_IDS: Final[int] = 100
    # A reorder carries the full list of an owner's records
    MAX_REORDER_IDS: Final[int] = 5000

    # Pagination
    DEFAULT_PAGE_SIZE: Final[int] = 10
    MAX_PAGE_SIZE: Final[int] = 100
