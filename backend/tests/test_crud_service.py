"""
Tests for OwnedCRUDService - the generic engine behind every collection.

Tests cover:
- Ownership guard (missing vs foreign records)
- Soft delete, restore and physical delete
- Best-effort bulk delete/restore
- Reorder validation before any write
- Partial updates validated against merged values
"""

from datetime import date

import pytest

from portfolio_api.models import Project
from portfolio_api.services.crud import DeletedMode
from portfolio_api.services.domain import CertificationService, ProjectService
from shared.utils.exceptions import (
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
)
from tests.conftest import OTHER_OWNER_ID, OWNER_ID


@pytest.fixture
def project_service(db_session):
    return ProjectService(db_session)


@pytest.fixture
def certification_service(db_session):
    return CertificationService(db_session)


def make_projects(service, count, owner_id=OWNER_ID):
    return [service.create(owner_id, {"title": f"Project {i}"}) for i in range(count)]


class TestOwnership:
    def test_find_one_own_record(self, project_service):
        created = project_service.create(OWNER_ID, {"title": "Mine"})

        found = project_service.find_one(OWNER_ID, created.id)
        assert found.title == "Mine"
        assert found.owner_id == OWNER_ID

    def test_find_one_missing_is_not_found(self, project_service):
        with pytest.raises(NotFoundError):
            project_service.find_one(OWNER_ID, "does-not-exist")

    def test_find_one_foreign_is_forbidden(self, project_service):
        created = project_service.create(OWNER_ID, {"title": "Mine"})

        with pytest.raises(ForbiddenError):
            project_service.find_one(OTHER_OWNER_ID, created.id)

    def test_update_foreign_is_forbidden(self, project_service):
        created = project_service.create(OWNER_ID, {"title": "Mine"})

        with pytest.raises(ForbiddenError):
            project_service.update(OTHER_OWNER_ID, created.id, {"title": "Stolen"})

        assert project_service.find_one(OWNER_ID, created.id).title == "Mine"

    def test_empty_owner_rejected(self, project_service):
        with pytest.raises(InvalidInputError):
            project_service.find_all("")

    def test_find_all_only_lists_own_records(self, project_service):
        make_projects(project_service, 2)
        make_projects(project_service, 3, owner_id=OTHER_OWNER_ID)

        page = project_service.find_all(OWNER_ID)
        assert page.total == 2
        assert all(p.owner_id == OWNER_ID for p in page.items)


class TestCreateAndUpdate:
    def test_create_applies_defaults(self, project_service):
        created = project_service.create(OWNER_ID, {"title": "Defaults"})

        assert created.featured is False
        assert created.order == 0
        assert created.tags == []
        assert created.deleted_at is None

    def test_create_ignores_system_fields(self, project_service):
        created = project_service.create(
            OWNER_ID, {"title": "Sneaky", "id": "fixed-id", "owner_id": OTHER_OWNER_ID}
        )

        assert created.id != "fixed-id"
        assert created.owner_id == OWNER_ID

    def test_create_rejects_unknown_fields(self, project_service):
        with pytest.raises(InvalidInputError):
            project_service.create(OWNER_ID, {"title": "X", "colour": "red"})

    def test_update_changes_only_supplied_fields(self, project_service):
        created = project_service.create(
            OWNER_ID, {"title": "Original", "description": "Keep me"}
        )

        updated = project_service.update(OWNER_ID, created.id, {"featured": True})
        assert updated.featured is True
        assert updated.title == "Original"
        assert updated.description == "Keep me"

    def test_update_validates_merged_dates(self, project_service):
        created = project_service.create(
            OWNER_ID, {"title": "Dated", "start_date": date(2024, 1, 1)}
        )

        with pytest.raises(InvalidInputError):
            project_service.update(OWNER_ID, created.id, {"end_date": date(2023, 1, 1)})

    def test_null_on_required_field_leaves_it_unchanged(self, project_service):
        created = project_service.create(OWNER_ID, {"title": "Keep"})

        updated = project_service.update(OWNER_ID, created.id, {"title": None})
        assert updated.title == "Keep"

    def test_invalid_url_rejected(self, project_service):
        with pytest.raises(InvalidInputError):
            project_service.create(OWNER_ID, {"title": "Bad", "url": "javascript:alert(1)"})

    def test_url_is_stripped(self, project_service):
        created = project_service.create(
            OWNER_ID, {"title": "Link", "github_url": "  https://github.com/me/repo  "}
        )
        assert created.github_url == "https://github.com/me/repo"


class TestSoftDelete:
    def test_remove_then_remove_again_is_not_found(self, project_service):
        created = project_service.create(OWNER_ID, {"title": "Temp"})

        project_service.remove(OWNER_ID, created.id)
        with pytest.raises(NotFoundError):
            project_service.remove(OWNER_ID, created.id)

    def test_removed_record_listed_only_with_deleted_modes(self, project_service):
        created = project_service.create(OWNER_ID, {"title": "Temp"})
        project_service.remove(OWNER_ID, created.id)

        assert project_service.find_all(OWNER_ID).total == 0
        assert project_service.find_all(OWNER_ID, mode=DeletedMode.ALL).total == 1
        deleted = project_service.find_all(OWNER_ID, mode=DeletedMode.DELETED_ONLY)
        assert deleted.items[0].deleted_at is not None

    def test_removed_record_found_only_with_deleted_modes(self, project_service):
        removed = project_service.create(OWNER_ID, {"title": "Temp"})
        alive = project_service.create(OWNER_ID, {"title": "Alive"})
        project_service.remove(OWNER_ID, removed.id)

        with pytest.raises(NotFoundError):
            project_service.find_one(OWNER_ID, removed.id)

        found = project_service.find_one(OWNER_ID, removed.id, mode=DeletedMode.ALL)
        assert found.title == "Temp"
        assert found.deleted_at is not None
        assert project_service.find_one(OWNER_ID, removed.id, mode=DeletedMode.DELETED_ONLY).id == removed.id

        with pytest.raises(NotFoundError):
            project_service.find_one(OWNER_ID, alive.id, mode=DeletedMode.DELETED_ONLY)

    def test_removed_foreign_record_is_forbidden_with_deleted_mode(self, project_service):
        removed = project_service.create(OWNER_ID, {"title": "Temp"})
        project_service.remove(OWNER_ID, removed.id)

        with pytest.raises(ForbiddenError):
            project_service.find_one(OTHER_OWNER_ID, removed.id, mode=DeletedMode.ALL)

    def test_restore_brings_record_back(self, project_service):
        created = project_service.create(OWNER_ID, {"title": "Temp"})
        project_service.remove(OWNER_ID, created.id)

        restored = project_service.restore(OWNER_ID, created.id)
        assert restored.deleted_at is None
        assert project_service.find_one(OWNER_ID, created.id).title == "Temp"

    def test_restore_active_record_is_not_found(self, project_service):
        created = project_service.create(OWNER_ID, {"title": "Alive"})

        with pytest.raises(NotFoundError):
            project_service.restore(OWNER_ID, created.id)

    def test_restore_foreign_record_is_forbidden(self, project_service):
        created = project_service.create(OWNER_ID, {"title": "Temp"})
        project_service.remove(OWNER_ID, created.id)

        with pytest.raises(ForbiddenError):
            project_service.restore(OTHER_OWNER_ID, created.id)


class TestHardDelete:
    def test_remove_is_physical(self, certification_service, db_session):
        created = certification_service.create(
            OWNER_ID, {"name": "CKA", "issuer": "CNCF", "issue_date": date(2023, 5, 1)}
        )

        certification_service.remove(OWNER_ID, created.id)

        assert certification_service.repo.find_by_id(created.id, mode=DeletedMode.ALL) is None

    def test_restore_not_supported(self, certification_service):
        with pytest.raises(InvalidInputError):
            certification_service.restore(OWNER_ID, "any-id")


class TestBulkOperations:
    def test_bulk_delete_reports_partial_failure(self, project_service):
        mine = make_projects(project_service, 2)
        theirs = make_projects(project_service, 1, owner_id=OTHER_OWNER_ID)

        result = project_service.bulk_delete(
            OWNER_ID, [mine[0].id, theirs[0].id, "missing", mine[1].id]
        )

        assert result.deleted_count == 2
        assert result.failed_ids == [theirs[0].id, "missing"]
        assert project_service.find_one(OTHER_OWNER_ID, theirs[0].id)

    def test_bulk_delete_repeated_id_fails_second_time(self, project_service):
        (project,) = make_projects(project_service, 1)

        result = project_service.bulk_delete(OWNER_ID, [project.id, project.id])

        assert result.deleted_count == 1
        assert result.failed_ids == [project.id]

    def test_bulk_delete_empty_list(self, project_service):
        result = project_service.bulk_delete(OWNER_ID, [])
        assert result.deleted_count == 0
        assert result.failed_ids == []

    def test_bulk_restore(self, project_service):
        projects = make_projects(project_service, 2)
        project_service.remove(OWNER_ID, projects[0].id)

        result = project_service.bulk_restore(OWNER_ID, [projects[0].id, projects[1].id])

        assert result.restored_count == 1
        assert result.failed_ids == [projects[1].id]

    def test_bulk_delete_hard_type(self, certification_service):
        created = certification_service.create(
            OWNER_ID, {"name": "AWS SAA", "issuer": "AWS", "issue_date": date(2022, 1, 10)}
        )

        result = certification_service.bulk_delete(OWNER_ID, [created.id])

        assert result.deleted_count == 1
        assert certification_service.repo.find_by_id(created.id, mode=DeletedMode.ALL) is None


class TestReorder:
    def test_reorder_assigns_positions(self, project_service):
        a, b, c = make_projects(project_service, 3)

        project_service.reorder(OWNER_ID, [c.id, a.id, b.id])

        titles = [p.title for p in project_service.list_active(OWNER_ID)]
        assert titles == [c.title, a.title, b.title]

    def test_reorder_with_foreign_id_writes_nothing(self, project_service):
        a, b = make_projects(project_service, 2)
        (foreign,) = make_projects(project_service, 1, owner_id=OTHER_OWNER_ID)

        with pytest.raises(ForbiddenError):
            project_service.reorder(OWNER_ID, [b.id, foreign.id, a.id])

        assert project_service.find_one(OWNER_ID, a.id).order == 0
        assert project_service.find_one(OWNER_ID, b.id).order == 0

    def test_reorder_with_deleted_id_is_forbidden(self, project_service):
        a, b = make_projects(project_service, 2)
        project_service.remove(OWNER_ID, b.id)

        with pytest.raises(ForbiddenError):
            project_service.reorder(OWNER_ID, [a.id, b.id])

    def test_reorder_with_duplicate_id_is_forbidden(self, project_service):
        a, b = make_projects(project_service, 2)

        with pytest.raises(ForbiddenError):
            project_service.reorder(OWNER_ID, [a.id, a.id, b.id])

    def test_reorder_not_supported_for_unordered_type(self, certification_service):
        with pytest.raises(InvalidInputError):
            certification_service.reorder(OWNER_ID, [])


class TestPagination:
    def test_limit_is_clamped(self, project_service):
        make_projects(project_service, 3)

        page = project_service.find_all(OWNER_ID, page=1, limit=1000)
        assert page.limit == 100
        assert page.total == 3

    def test_second_page(self, project_service):
        make_projects(project_service, 3)

        first = project_service.find_all(OWNER_ID, page=1, limit=2)
        second = project_service.find_all(OWNER_ID, page=2, limit=2)

        assert len(first.items) == 2
        assert len(second.items) == 1
        assert {p.id for p in first.items}.isdisjoint({p.id for p in second.items})

    def test_featured_filter(self, project_service):
        project_service.create(OWNER_ID, {"title": "Star", "featured": True})
        project_service.create(OWNER_ID, {"title": "Plain"})

        page = project_service.find_all(OWNER_ID, featured=True)
        assert [p.title for p in page.items] == ["Star"]
