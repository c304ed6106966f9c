"""
Owner-facing CRUD routes for every content collection.
"""

from typing import Any

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from portfolio_api.routers.portfolio._base import add_collection_routes
from portfolio_api.schemas import (
    BlogPostCreate,
    BlogPostOutput,
    BlogPostUpdate,
    CertificationCreate,
    CertificationOutput,
    CertificationUpdate,
    CompanyCreate,
    CompanyOutput,
    CompanyUpdate,
    ContactCreate,
    ContactOutput,
    ContactUpdate,
    EducationCreate,
    EducationOutput,
    EducationUpdate,
    ExperienceCreate,
    ExperienceOutput,
    ExperienceUpdate,
    ProjectCreate,
    ProjectOutput,
    ProjectUpdate,
    PublishInput,
    SkillCreate,
    SkillOutput,
    SkillUpdate,
    TestimonialCreate,
    TestimonialOutput,
    TestimonialUpdate,
)
from portfolio_api.services.domain import (
    BlogService,
    CertificationService,
    CompanyService,
    ContactService,
    EducationService,
    ExperienceService,
    ProjectService,
    SkillService,
    TestimonialService,
)
from shared.config.constants import Collections
from shared.infrastructure.db import get_db
from shared.security.auth import current_owner_id


router = APIRouter(tags=["portfolio"])


# =============================================================================
# Type filters (query parameters)
# =============================================================================


def featured_filter(featured: bool | None = Query(default=None)) -> dict[str, Any]:
    return {"featured": featured}


def skill_filters(category: str | None = Query(default=None)) -> dict[str, Any]:
    return {"category": category}


def blog_filters(published: bool | None = Query(default=None)) -> dict[str, Any]:
    return {"published": published}


def contact_filters(active_only: bool = Query(default=False)) -> dict[str, Any]:
    return {"active_only": active_only}


def experience_filters(current: bool | None = Query(default=None)) -> dict[str, Any]:
    return {"current": current}


# =============================================================================
# Collection-specific routes (registered before /{entity_id})
# =============================================================================


@router.get("/skills/categories", response_model=list[str])
def list_skill_categories(owner_id: str = Depends(current_owner_id)) -> list[str]:
    """The allowed skill categories."""
    return SkillService.categories()


@router.get("/skills/grouped", response_model=dict[str, list[SkillOutput]])
def list_skills_grouped(
    db: Session = Depends(get_db),
    owner_id: str = Depends(current_owner_id),
):
    """Active skills grouped by category."""
    return SkillService(db).find_grouped(owner_id)


@router.patch("/blog/{post_id}/publish", response_model=BlogPostOutput)
def publish_blog_post(
    post_id: str,
    body: PublishInput,
    db: Session = Depends(get_db),
    owner_id: str = Depends(current_owner_id),
):
    """Publish or unpublish a post."""
    return BlogService(db).publish(owner_id, post_id, body.published)


# =============================================================================
# Generic collection routes
# =============================================================================

add_collection_routes(
    router,
    path=Collections.PROJECTS,
    service_class=ProjectService,
    output_schema=ProjectOutput,
    create_schema=ProjectCreate,
    update_schema=ProjectUpdate,
    filters=featured_filter,
    soft_delete=True,
    orderable=True,
)

add_collection_routes(
    router,
    path=Collections.EXPERIENCES,
    service_class=ExperienceService,
    output_schema=ExperienceOutput,
    create_schema=ExperienceCreate,
    update_schema=ExperienceUpdate,
    filters=experience_filters,
    soft_delete=True,
)

add_collection_routes(
    router,
    path=Collections.EDUCATION,
    service_class=EducationService,
    output_schema=EducationOutput,
    create_schema=EducationCreate,
    update_schema=EducationUpdate,
    soft_delete=True,
)

add_collection_routes(
    router,
    path=Collections.SKILLS,
    service_class=SkillService,
    output_schema=SkillOutput,
    create_schema=SkillCreate,
    update_schema=SkillUpdate,
    filters=skill_filters,
    soft_delete=True,
    orderable=True,
)

add_collection_routes(
    router,
    path=Collections.CERTIFICATIONS,
    service_class=CertificationService,
    output_schema=CertificationOutput,
    create_schema=CertificationCreate,
    update_schema=CertificationUpdate,
    soft_delete=False,
)

add_collection_routes(
    router,
    path=Collections.BLOG,
    service_class=BlogService,
    output_schema=BlogPostOutput,
    create_schema=BlogPostCreate,
    update_schema=BlogPostUpdate,
    filters=blog_filters,
    soft_delete=False,
)

add_collection_routes(
    router,
    path=Collections.TESTIMONIALS,
    service_class=TestimonialService,
    output_schema=TestimonialOutput,
    create_schema=TestimonialCreate,
    update_schema=TestimonialUpdate,
    filters=featured_filter,
    soft_delete=False,
    orderable=True,
)

add_collection_routes(
    router,
    path=Collections.COMPANIES,
    service_class=CompanyService,
    output_schema=CompanyOutput,
    create_schema=CompanyCreate,
    update_schema=CompanyUpdate,
    soft_delete=False,
)

add_collection_routes(
    router,
    path=Collections.CONTACTS,
    service_class=ContactService,
    output_schema=ContactOutput,
    create_schema=ContactCreate,
    update_schema=ContactUpdate,
    filters=contact_filters,
    soft_delete=False,
    orderable=True,
)
