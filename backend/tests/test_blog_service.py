"""
Tests for BlogService - slugs and publishing.
"""

import pytest

from portfolio_api.models import BlogPost
from portfolio_api.services.crud import DeletedMode
from portfolio_api.services.domain import BlogService
from shared.utils.exceptions import ConflictError, ForbiddenError, NotFoundError
from tests.conftest import OTHER_OWNER_ID, OWNER_ID


@pytest.fixture
def blog_service(db_session):
    return BlogService(db_session)


def make_post(service, title="Hello World", owner_id=OWNER_ID, **extra):
    return service.create(owner_id, {"title": title, "content": "Body", **extra})


class TestSlugs:
    def test_slug_derived_from_title(self, blog_service):
        post = make_post(blog_service, title="  Hello,   World! ")
        assert post.slug == "hello-world"

    def test_colliding_titles_get_suffixes(self, blog_service):
        first = make_post(blog_service)
        second = make_post(blog_service)
        third = make_post(blog_service)

        assert [first.slug, second.slug, third.slug] == [
            "hello-world",
            "hello-world-2",
            "hello-world-3",
        ]

    def test_long_colliding_titles_fit_slug_column(self, blog_service):
        column_length = BlogPost.__table__.c.slug.type.length
        title = "a" * 200

        first = make_post(blog_service, title=title)
        second = make_post(blog_service, title=title)

        assert first.slug != second.slug
        assert len(first.slug) <= column_length
        assert len(second.slug) <= column_length
        assert second.slug.endswith("-2")

    def test_slugs_unique_across_owners(self, blog_service):
        mine = make_post(blog_service)
        theirs = make_post(blog_service, owner_id=OTHER_OWNER_ID)

        assert mine.slug != theirs.slug

    def test_explicit_slug_normalized(self, blog_service):
        post = make_post(blog_service, slug="My Custom Slug")
        assert post.slug == "my-custom-slug"

    def test_update_with_taken_slug_conflicts(self, blog_service):
        make_post(blog_service, title="First")
        second = make_post(blog_service, title="Second")

        with pytest.raises(ConflictError):
            blog_service.update(OWNER_ID, second.id, {"slug": "first"})

    def test_update_with_own_slug_is_allowed(self, blog_service):
        post = make_post(blog_service, title="First")

        updated = blog_service.update(OWNER_ID, post.id, {"slug": "first", "content": "New"})
        assert updated.slug == "first"
        assert updated.content == "New"

    def test_title_change_regenerates_slug(self, blog_service):
        post = make_post(blog_service, title="Draft Title")

        updated = blog_service.update(OWNER_ID, post.id, {"title": "Final Title"})
        assert updated.slug == "final-title"

    def test_title_change_never_collides_with_itself(self, blog_service):
        post = make_post(blog_service, title="Same")

        updated = blog_service.update(OWNER_ID, post.id, {"title": "SAME!"})
        assert updated.slug == "same"


class TestLookup:
    def test_find_by_id_or_slug(self, blog_service):
        post = make_post(blog_service)

        assert blog_service.find_one(OWNER_ID, post.id).id == post.id
        assert blog_service.find_one(OWNER_ID, "hello-world").id == post.id

    def test_foreign_slug_is_forbidden(self, blog_service):
        make_post(blog_service)

        with pytest.raises(ForbiddenError):
            blog_service.find_one(OTHER_OWNER_ID, "hello-world")

    def test_lookup_honours_deleted_mode_for_id_and_slug(self, blog_service):
        post = make_post(blog_service)
        assert blog_service.repo.soft_delete_owned(post.id, OWNER_ID)

        for key in (post.id, "hello-world"):
            with pytest.raises(NotFoundError):
                blog_service.find_one(OWNER_ID, key)
            assert blog_service.find_one(OWNER_ID, key, mode=DeletedMode.ALL).id == post.id

    def test_published_lookup_ignores_drafts(self, blog_service):
        make_post(blog_service)

        with pytest.raises(NotFoundError):
            blog_service.find_published_by_slug(OWNER_ID, "hello-world")


class TestPublishing:
    def test_create_published_stamps_date(self, blog_service):
        post = make_post(blog_service, published=True)

        assert post.published is True
        assert post.published_at is not None

    def test_draft_has_no_publish_date(self, blog_service):
        post = make_post(blog_service)
        assert post.published_at is None

    def test_publish_then_unpublish(self, blog_service):
        post = make_post(blog_service)

        published = blog_service.publish(OWNER_ID, post.id, True)
        assert published.published is True
        assert published.published_at is not None

        unpublished = blog_service.publish(OWNER_ID, post.id, False)
        assert unpublished.published is False
        assert unpublished.published_at is None

    def test_republish_keeps_original_date(self, blog_service):
        post = make_post(blog_service, published=True)

        again = blog_service.publish(OWNER_ID, post.id, True)
        assert again.published_at == post.published_at

    def test_published_filter(self, blog_service):
        make_post(blog_service, title="Draft")
        make_post(blog_service, title="Live", published=True)

        page = blog_service.find_all(OWNER_ID, published=True)
        assert [p.title for p in page.items] == ["Live"]
