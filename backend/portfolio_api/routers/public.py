"""
Public portfolio endpoints (no credentials).

The handle is resolved to an owner through the OwnerDirectory. Hidden
sections return an empty page; a private portfolio is a 404.
"""

from typing import Any

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from portfolio_api.routers._common.pagination import (
    Pagination,
    get_public_pagination,
    page_output,
)
from portfolio_api.schemas import (
    BlogPostOutput,
    CertificationOutput,
    CompanyOutput,
    ContactOutput,
    EducationOutput,
    ExperienceOutput,
    PageOutput,
    ProjectOutput,
    PublicProfileOutput,
    SkillOutput,
    TestimonialOutput,
)
from portfolio_api.services.domain import PublicPortfolioService, get_owner_directory
from portfolio_api.services.domain.owner_directory import OwnerDirectory
from shared.config.constants import Collections
from shared.infrastructure.db import get_db


router = APIRouter(prefix="/api/public/portfolio/{handle}", tags=["public-portfolio"])

SECTION_OUTPUTS = {
    Collections.PROJECTS: ProjectOutput,
    Collections.EXPERIENCES: ExperienceOutput,
    Collections.EDUCATION: EducationOutput,
    Collections.SKILLS: SkillOutput,
    Collections.CERTIFICATIONS: CertificationOutput,
    Collections.BLOG: BlogPostOutput,
    Collections.TESTIMONIALS: TestimonialOutput,
    Collections.COMPANIES: CompanyOutput,
    Collections.CONTACTS: ContactOutput,
}


def get_public_service(
    db: Session = Depends(get_db),
    directory: OwnerDirectory = Depends(get_owner_directory),
) -> PublicPortfolioService:
    return PublicPortfolioService(db, directory)


@router.get("")
def get_portfolio(
    handle: str,
    service: PublicPortfolioService = Depends(get_public_service),
) -> dict[str, Any]:
    """Profile and every visible section in one response."""
    return service.get_portfolio(handle)


@router.get("/profile", response_model=PublicProfileOutput)
def get_public_profile(
    handle: str,
    service: PublicPortfolioService = Depends(get_public_service),
):
    return service.get_profile(handle)


@router.get("/blog/{slug}", response_model=BlogPostOutput)
def get_public_post(
    handle: str,
    slug: str,
    service: PublicPortfolioService = Depends(get_public_service),
):
    """A single published post."""
    return service.get_published_post(handle, slug)


def _add_section_route(collection: str, output_schema: type) -> None:
    @router.get(f"/{collection}", response_model=PageOutput[output_schema], name=f"public_{collection}")
    def list_section(
        handle: str,
        featured: bool | None = Query(default=None),
        category: str | None = Query(default=None),
        pagination: Pagination = Depends(get_public_pagination),
        service: PublicPortfolioService = Depends(get_public_service),
    ):
        result = service.get_section(
            handle,
            collection,
            page=pagination.page,
            limit=pagination.limit,
            featured=featured,
            category=category,
        )
        return page_output(result)


for _collection, _output in SECTION_OUTPUTS.items():
    _add_section_route(_collection, _output)
