"""
Blog Service.

Business rules:
- Slugs are unique across all owners and derived with slugify()
- On create, an explicit slug is normalized and then disambiguated
  (hello-world, hello-world-2, ...) just like a title-derived one
- On update, an explicit slug taken by a different post is a ConflictError;
  a title change without an explicit slug regenerates the slug, ignoring the
  post itself
- published_at is stamped when a post becomes published and cleared when it
  is unpublished
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from portfolio_api.models import BlogPost
from portfolio_api.models.base import utcnow
from portfolio_api.schemas import BlogPostOutput
from portfolio_api.services.base_service import EntityConfig, OwnedCRUDService
from portfolio_api.services.crud import DeletedMode, assert_owned, slugify, unique_slug
from shared.config.constants import Collections
from shared.utils.exceptions import NotFoundError, SlugConflictError
from shared.utils.validators import validate_owner_id


class BlogService(OwnedCRUDService[BlogPost, BlogPostOutput]):
    """Service for blog posts."""

    def __init__(self, db: Session):
        super().__init__(
            db,
            EntityConfig(
                model=BlogPost,
                output_schema=BlogPostOutput,
                entity_name="Blog post",
                collection=Collections.BLOG,
                soft_delete=False,
                default_sort=("-published_at", "-created_at"),
                filter_fields=("published",),
                url_fields=frozenset({"cover_image"}),
            ),
        )

    # =========================================================================
    # Query Methods
    # =========================================================================

    def find_one(
        self,
        owner_id: str,
        id_or_slug: str,
        mode: DeletedMode = DeletedMode.ACTIVE,
    ) -> BlogPostOutput:
        """Get a post by id, falling back to slug lookup. Both honour mode."""
        validate_owner_id(owner_id)
        post = self.repo.find_by_id(id_or_slug, mode=mode) or self.repo.find_one(
            {"slug": id_or_slug}, mode=mode
        )
        return self.to_output(assert_owned(post, owner_id, self.entity_name, id_or_slug))

    def find_published_by_slug(self, owner_id: str, slug: str) -> BlogPostOutput:
        """A published post of owner_id by slug, for the public site."""
        post = self.repo.find_one({"owner_id": owner_id, "slug": slug, "published": True})
        if post is None:
            raise NotFoundError(self.entity_name, slug)
        return self.to_output(post)

    def slug_exists(self, slug: str, exclude_id: str | None = None) -> bool:
        """True when any post (any owner, deleted or not) holds slug."""
        return self.repo.exists({"slug": slug}, exclude_id=exclude_id, mode=DeletedMode.ALL)

    # =========================================================================
    # Command Methods
    # =========================================================================

    def publish(self, owner_id: str, post_id: str, published: bool) -> BlogPostOutput:
        """Publish or unpublish a post."""
        return self.update(owner_id, post_id, {"published": published})

    # =========================================================================
    # Preparation Hooks
    # =========================================================================

    def _prepare_create(self, owner_id: str, data: dict[str, Any]) -> dict[str, Any]:
        base = slugify(data.get("slug") or data["title"])
        data["slug"] = unique_slug(base, self.slug_exists)
        data["published_at"] = utcnow() if data.get("published") else None
        return data

    def _prepare_update(self, entity: BlogPost, data: dict[str, Any]) -> dict[str, Any]:
        explicit_slug = data.pop("slug", None)

        if explicit_slug:
            slug = slugify(explicit_slug)
            if slug != entity.slug and self.slug_exists(slug, exclude_id=entity.id):
                raise SlugConflictError(slug, post_id=entity.id)
            data["slug"] = slug
        elif "title" in data and data["title"] != entity.title:
            data["slug"] = unique_slug(
                slugify(data["title"]),
                lambda candidate: self.slug_exists(candidate, exclude_id=entity.id),
            )

        if "published" in data:
            if data["published"] and not entity.published:
                data["published_at"] = utcnow()
            elif not data["published"]:
                data["published_at"] = None

        return data
