"""
Repository Pattern for owned, soft-deletable content.

Every read takes an explicit DeletedMode (default ACTIVE) so the exclusion of
soft-deleted rows is visible at each call site instead of being injected by a
framework hook. The clause is built in exactly one place,
_apply_deleted_filter(), and every read path goes through it.

Write methods flush but never commit; the service layer commits each logical
write with safe_commit().

Usage:
    from portfolio_api.services.crud.repository import SoftDeleteRepository, DeletedMode

    repo = SoftDeleteRepository(Project, db)

    projects = repo.find_many({"owner_id": owner_id}, order_by=[Project.order])
    trashed = repo.find_many({"owner_id": owner_id}, mode=DeletedMode.DELETED_ONLY)
    project = repo.find_by_id(project_id)               # active only
    anyrow = repo.find_by_id(project_id, mode=DeletedMode.ALL)
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import delete, func, select, update
from sqlalchemy.orm import Session
from sqlalchemy.sql import ColumnElement, Select

from portfolio_api.models import Base
from portfolio_api.models.base import utcnow
from shared.infrastructure.db import translate_db_errors

ModelT = TypeVar("ModelT", bound=Base)


class DeletedMode(str, Enum):
    """Which rows a read sees with respect to soft deletion."""

    ACTIVE = "active"
    ALL = "all"
    DELETED_ONLY = "deleted_only"


class SoftDeleteRepository(Generic[ModelT]):
    """
    Generic data access for one owned model.

    The model must provide id, owner_id and deleted_at columns (OwnedMixin).
    """

    def __init__(self, model: type[ModelT], session: Session):
        self._model = model
        self._session = session

    @property
    def model(self) -> type[ModelT]:
        """The SQLAlchemy model class."""
        return self._model

    @property
    def session(self) -> Session:
        """The database session."""
        return self._session

    # =========================================================================
    # Query building
    # =========================================================================

    def _apply_deleted_filter(self, query: Select, mode: DeletedMode) -> Select:
        """Restrict a query according to the soft delete mode."""
        if mode == DeletedMode.ACTIVE:
            return query.where(self._model.deleted_at.is_(None))
        if mode == DeletedMode.DELETED_ONLY:
            return query.where(self._model.deleted_at.is_not(None))
        return query

    def _apply_filters(
        self,
        query: Select,
        filters: dict[str, Any] | None,
        criteria: Sequence[ColumnElement] | None = None,
    ) -> Select:
        """Equality filters by column name plus arbitrary SQL criteria."""
        for column_name, value in (filters or {}).items():
            query = query.where(getattr(self._model, column_name) == value)
        if criteria:
            query = query.where(*criteria)
        return query

    def _select(
        self,
        filters: dict[str, Any] | None,
        criteria: Sequence[ColumnElement] | None,
        mode: DeletedMode,
    ) -> Select:
        query = select(self._model)
        query = self._apply_filters(query, filters, criteria)
        return self._apply_deleted_filter(query, mode)

    # =========================================================================
    # Reads
    # =========================================================================

    def find_by_id(
        self,
        entity_id: str,
        *,
        mode: DeletedMode = DeletedMode.ACTIVE,
    ) -> ModelT | None:
        """
        Find entity by primary key, regardless of owner.

        Ownership is checked by the caller so that "missing" and "not yours"
        stay distinguishable.
        """
        query = self._select(None, [self._model.id == entity_id], mode)
        with translate_db_errors(self._session):
            return self._session.scalar(query)

    def find_by_ids(
        self,
        entity_ids: Sequence[str],
        *,
        owner_id: str | None = None,
        mode: DeletedMode = DeletedMode.ACTIVE,
    ) -> Sequence[ModelT]:
        """Find entities by IDs (order not guaranteed, duplicates collapse)."""
        if not entity_ids:
            return []
        filters = {"owner_id": owner_id} if owner_id is not None else None
        query = self._select(filters, [self._model.id.in_(list(entity_ids))], mode)
        with translate_db_errors(self._session):
            return self._session.scalars(query).all()

    def find_one(
        self,
        filters: dict[str, Any],
        *,
        mode: DeletedMode = DeletedMode.ACTIVE,
    ) -> ModelT | None:
        """First entity matching the equality filters."""
        query = self._select(filters, None, mode).limit(1)
        with translate_db_errors(self._session):
            return self._session.scalar(query)

    def find_many(
        self,
        filters: dict[str, Any] | None = None,
        *,
        criteria: Sequence[ColumnElement] | None = None,
        mode: DeletedMode = DeletedMode.ACTIVE,
        order_by: Sequence[Any] | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> Sequence[ModelT]:
        """
        Find entities matching filters.

        Args:
            filters: Column name -> value equality filters.
            criteria: Extra SQL expressions.
            mode: Soft delete mode.
            order_by: Sort expressions; id is always appended as tiebreaker.
            offset: Number of results to skip.
            limit: Maximum number of results.
        """
        query = self._select(filters, criteria, mode)
        query = query.order_by(*(order_by or []), self._model.id)
        if offset is not None:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        with translate_db_errors(self._session):
            return self._session.scalars(query).all()

    def count(
        self,
        filters: dict[str, Any] | None = None,
        *,
        criteria: Sequence[ColumnElement] | None = None,
        mode: DeletedMode = DeletedMode.ACTIVE,
    ) -> int:
        """Count entities matching filters."""
        query = select(func.count()).select_from(self._model)
        query = self._apply_filters(query, filters, criteria)
        query = self._apply_deleted_filter(query, mode)
        with translate_db_errors(self._session):
            return self._session.scalar(query) or 0

    def exists(
        self,
        filters: dict[str, Any],
        *,
        exclude_id: str | None = None,
        mode: DeletedMode = DeletedMode.ACTIVE,
    ) -> bool:
        """Check whether any entity matches, optionally ignoring one ID."""
        criteria = [self._model.id != exclude_id] if exclude_id is not None else None
        return self.count(filters, criteria=criteria, mode=mode) > 0

    # =========================================================================
    # Entity writes (flushed, not committed)
    # =========================================================================

    def insert(self, entity: ModelT) -> ModelT:
        """Add a new entity and flush so store defaults (id, timestamps) are set."""
        with translate_db_errors(self._session):
            self._session.add(entity)
            self._session.flush()
        return entity

    def save(self, entity: ModelT) -> ModelT:
        """Flush pending changes on an existing entity."""
        with translate_db_errors(self._session):
            self._session.flush()
        return entity

    def soft_delete(self, entity: ModelT) -> ModelT:
        """Mark as deleted. No cascades."""
        entity.soft_delete()
        return self.save(entity)

    def restore(self, entity: ModelT) -> ModelT:
        """Clear the deletion marker."""
        entity.restore()
        return self.save(entity)

    def hard_delete(self, entity: ModelT) -> None:
        """Physically remove the row."""
        with translate_db_errors(self._session):
            self._session.delete(entity)
            self._session.flush()

    # =========================================================================
    # Conditional single-row writes
    # =========================================================================

    def _owned_row(self, entity_id: str, owner_id: str) -> list[ColumnElement]:
        return [self._model.id == entity_id, self._model.owner_id == owner_id]

    def _rowcount(self, statement: Any) -> int:
        with translate_db_errors(self._session):
            result = self._session.execute(statement)
        return result.rowcount or 0

    def soft_delete_owned(self, entity_id: str, owner_id: str) -> bool:
        """Soft delete iff the row exists, is owned by owner_id and is active."""
        statement = (
            update(self._model)
            .where(*self._owned_row(entity_id, owner_id), self._model.deleted_at.is_(None))
            .values(deleted_at=utcnow())
        )
        return self._rowcount(statement) == 1

    def restore_owned(self, entity_id: str, owner_id: str) -> bool:
        """Restore iff the row exists, is owned by owner_id and is deleted."""
        statement = (
            update(self._model)
            .where(*self._owned_row(entity_id, owner_id), self._model.deleted_at.is_not(None))
            .values(deleted_at=None)
        )
        return self._rowcount(statement) == 1

    def hard_delete_owned(self, entity_id: str, owner_id: str) -> bool:
        """Remove iff the row exists, is owned by owner_id and is active."""
        statement = delete(self._model).where(
            *self._owned_row(entity_id, owner_id), self._model.deleted_at.is_(None)
        )
        return self._rowcount(statement) == 1

    def set_order(self, entity_id: str, owner_id: str, order: int) -> bool:
        """Set the display position of one active owned row."""
        statement = (
            update(self._model)
            .where(*self._owned_row(entity_id, owner_id), self._model.deleted_at.is_(None))
            .values(order=order)
        )
        return self._rowcount(statement) == 1

    def delete_all_by_owner(self, owner_id: str) -> int:
        """
        Physically remove every row of one owner, soft-deleted rows included.

        Returns:
            Number of rows removed.
        """
        statement = delete(self._model).where(self._model.owner_id == owner_id)
        return self._rowcount(statement)
