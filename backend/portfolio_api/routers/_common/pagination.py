"""
Standardized page-based pagination for all list endpoints.

Usage:
    from portfolio_api.routers._common.pagination import Pagination, get_pagination

    @router.get("/projects")
    def list_projects(pagination: Pagination = Depends(get_pagination), ...):
        result = service.find_all(owner_id, page=pagination.page, limit=pagination.limit)
        return page_output(result)
"""

from dataclasses import dataclass
from typing import Any

from fastapi import Query

from portfolio_api.services.base_service import PageResult
from shared.config.constants import Limits
from shared.config.settings import settings


@dataclass
class Pagination:
    """
    Pagination parameters with validation.

    Attributes:
        page: 1-based page number
        limit: Items per page (1 to max_limit)
        max_limit: Maximum allowed limit
    """

    page: int
    limit: int
    max_limit: int = Limits.MAX_PAGE_SIZE

    def __post_init__(self):
        """Validate and normalize values."""
        self.limit = min(max(1, self.limit), self.max_limit)
        self.page = max(1, self.page)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def get_pagination(
    page: int = Query(default=1, ge=1, description="Page number (1-based)"),
    limit: int = Query(
        default=Limits.DEFAULT_PAGE_SIZE,
        ge=1,
        le=Limits.MAX_PAGE_SIZE,
        description="Items per page",
    ),
) -> Pagination:
    """FastAPI dependency for owner-facing list endpoints."""
    return Pagination(page=page, limit=limit, max_limit=settings.max_page_size)


def get_public_pagination(
    page: int = Query(default=1, ge=1, description="Page number (1-based)"),
    limit: int = Query(default=Limits.DEFAULT_PAGE_SIZE, ge=1, description="Items per page"),
) -> Pagination:
    """Pagination for the public portfolio, capped by public_max_page_size."""
    return Pagination(page=page, limit=limit, max_limit=settings.public_max_page_size)


def page_output(result: PageResult) -> dict[str, Any]:
    """Convert a service PageResult into the response body."""
    return {
        "items": result.items,
        "total": result.total,
        "page": result.page,
        "limit": result.limit,
    }
