"""
Public Portfolio Service - read-only view of an owner's portfolio.

Rules:
- A profile with is_public = False makes the whole portfolio NotFound
- A section whose show_* flag is off reads as empty
- Only active rows are returned; blog also requires published = True and
  contacts require active = True
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from portfolio_api.schemas import BlogPostOutput, PublicProfileOutput, VisibilityOutput
from portfolio_api.services.base_service import PageResult
from shared.config.constants import VISIBILITY_FLAGS, Collections
from shared.config.settings import settings
from shared.utils.exceptions import NotFoundError

from .blog_service import BlogService
from .owner_directory import IdentityOwnerDirectory, OwnerDirectory
from .profile_service import ProfileService
from .registry import get_service

# Filters that always apply on the public surface
PUBLIC_FILTERS: dict[str, dict[str, Any]] = {
    Collections.BLOG: {"published": True},
    Collections.CONTACTS: {"active_only": True},
}


class PublicPortfolioService:
    """Read-only, visibility-filtered access by public handle."""

    def __init__(self, db: Session, directory: OwnerDirectory | None = None):
        self._db = db
        self._directory = directory or IdentityOwnerDirectory()
        self._profiles = ProfileService(db)

    # =========================================================================
    # Query Methods
    # =========================================================================

    def get_profile(self, handle: str) -> PublicProfileOutput:
        owner_id, visibility = self._resolve(handle)
        profile = self._profiles.find(owner_id)
        sections = {
            collection: getattr(visibility, flag) for collection, flag in VISIBILITY_FLAGS.items()
        }
        return PublicProfileOutput(
            owner_id=owner_id,
            bio=profile.bio if profile else None,
            avatar=profile.avatar if profile else None,
            resume_url=profile.resume_url if profile else None,
            location=profile.location if profile else None,
            available_for_hire=profile.available_for_hire if profile else False,
            portfolio_url=profile.portfolio_url if profile else None,
            theme=profile.theme if profile else "default",
            sections=sections,
        )

    def get_section(
        self,
        handle: str,
        collection: str,
        page: int = 1,
        limit: int | None = None,
        **filters: Any,
    ) -> PageResult:
        """One page of a section; empty when the owner hides it."""
        owner_id, visibility = self._resolve(handle)
        limit = limit or settings.default_page_size

        if not getattr(visibility, VISIBILITY_FLAGS[collection]):
            return PageResult(items=[], total=0, page=max(1, page), limit=limit)

        service = get_service(collection, self._db)
        return service.find_all(
            owner_id,
            page=page,
            limit=limit,
            max_limit=settings.public_max_page_size,
            **{**filters, **PUBLIC_FILTERS.get(collection, {})},
        )

    def get_portfolio(self, handle: str) -> dict[str, Any]:
        """Profile plus every visible section, unpaginated."""
        owner_id, visibility = self._resolve(handle)
        portfolio: dict[str, Any] = {Collections.PROFILE: self.get_profile(handle)}
        for collection, flag in VISIBILITY_FLAGS.items():
            if not getattr(visibility, flag):
                portfolio[collection] = []
                continue
            service = get_service(collection, self._db)
            portfolio[collection] = service.list_active(
                owner_id, **PUBLIC_FILTERS.get(collection, {})
            )
        return portfolio

    def get_published_post(self, handle: str, slug: str) -> BlogPostOutput:
        owner_id, visibility = self._resolve(handle)
        if not visibility.show_blog:
            raise NotFoundError("Blog post", slug)
        return BlogService(self._db).find_published_by_slug(owner_id, slug)

    # =========================================================================
    # Internal Helpers
    # =========================================================================

    def _resolve(self, handle: str) -> tuple[str, VisibilityOutput]:
        owner_id = self._directory.resolve(handle)
        if owner_id is None:
            raise NotFoundError("Portfolio", handle)

        visibility = self._profiles.get_visibility(owner_id)
        if not visibility.is_public:
            raise NotFoundError("Portfolio", handle)
        return owner_id, visibility
