"""
Collection registry: collection key → service class.

Used wherever an operation fans out over every collection (account cleanup,
export, the public portfolio).
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from portfolio_api.services.base_service import OwnedCRUDService
from shared.config.constants import Collections

from .blog_service import BlogService
from .certification_service import CertificationService
from .company_service import CompanyService
from .contact_service import ContactService
from .education_service import EducationService
from .experience_service import ExperienceService
from .project_service import ProjectService
from .skill_service import SkillService
from .testimonial_service import TestimonialService

SERVICE_CLASSES: dict[str, type[OwnedCRUDService]] = {
    Collections.PROJECTS: ProjectService,
    Collections.EXPERIENCES: ExperienceService,
    Collections.EDUCATION: EducationService,
    Collections.SKILLS: SkillService,
    Collections.CERTIFICATIONS: CertificationService,
    Collections.BLOG: BlogService,
    Collections.TESTIMONIALS: TestimonialService,
    Collections.COMPANIES: CompanyService,
    Collections.CONTACTS: ContactService,
}


def get_service(collection: str, db: Session) -> OwnedCRUDService:
    """Instantiate the service for a collection key."""
    return SERVICE_CLASSES[collection](db)  # type: ignore[call-arg]
