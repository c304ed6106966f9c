"""
Domain Services - application layer.

Structure:
    Router (thin controller)
        ↓
    Service (business logic)  ← YOU ARE HERE
        ↓
    Repository (data access)
        ↓
    Model (entity)

Usage:
    from portfolio_api.services.domain import ProjectService

    # In router
    service = ProjectService(db)
    page = service.find_all(owner_id, page=1, limit=10, featured=True)
"""

from .project_service import ProjectService
from .experience_service import ExperienceService
from .education_service import EducationService
from .skill_service import SkillService
from .certification_service import CertificationService
from .blog_service import BlogService
from .testimonial_service import TestimonialService
from .company_service import CompanyService
from .contact_service import ContactService
from .profile_service import ProfileService
from .public_service import PublicPortfolioService
from .account_service import AccountDataService, AccountCleanupResult
from .owner_directory import OwnerDirectory, IdentityOwnerDirectory, get_owner_directory
from .registry import SERVICE_CLASSES, get_service

__all__ = [
    "ProjectService",
    "ExperienceService",
    "EducationService",
    "SkillService",
    "CertificationService",
    "BlogService",
    "TestimonialService",
    "CompanyService",
    "ContactService",
    "ProfileService",
    "PublicPortfolioService",
    "AccountDataService",
    "AccountCleanupResult",
    "OwnerDirectory",
    "IdentityOwnerDirectory",
    "get_owner_directory",
    "SERVICE_CLASSES",
    "get_service",
]
