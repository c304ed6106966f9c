"""
Base service for owned content collections.

One generic engine, OwnedCRUDService, implements the operation set shared by
every collection. Each collection configures it with an EntityConfig (model,
output schema, delete mode, orderability, default sort, type filters) and adds
only its own business rules through the validation and preparation hooks.

Architecture:
    Router (thin) → Service (business logic) → Repository (data access) → Model

Usage:
    from portfolio_api.services.base_service import EntityConfig, OwnedCRUDService

    class ProjectService(OwnedCRUDService[Project, ProjectOutput]):
        def __init__(self, db: Session):
            super().__init__(db, EntityConfig(
                model=Project,
                output_schema=ProjectOutput,
                entity_name="Project",
                collection=Collections.PROJECTS,
                orderable=True,
                default_sort=("order", "-created_at"),
                filter_fields=("featured",),
            ))
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from portfolio_api.models import Base
from portfolio_api.services.crud import (
    BulkDeleteResult,
    BulkRestoreResult,
    DeletedMode,
    SoftDeleteRepository,
    assert_owned,
    bulk_delete,
    bulk_restore,
    reorder,
)
from shared.config.logging import get_logger, mask_owner_id
from shared.config.settings import settings
from shared.infrastructure.db import safe_commit
from shared.utils.exceptions import ConflictError, InvalidInputError
from shared.utils.validators import validate_owner_id, validate_url

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)
OutputT = TypeVar("OutputT", bound=BaseModel)


@dataclass(frozen=True)
class EntityConfig:
    """Per-collection configuration of the generic engine."""

    model: type
    output_schema: type[BaseModel]
    entity_name: str  # Human-readable name for error messages
    collection: str

    # Soft delete (True) or physical delete (False) on remove/bulk delete
    soft_delete: bool = True
    orderable: bool = False

    # Column names; a leading "-" sorts descending. id is always the final tiebreaker.
    default_sort: tuple[str, ...] = ("-created_at",)

    # find_all keyword filters that map 1:1 to equality on a column
    filter_fields: tuple[str, ...] = ()

    # Link fields checked with validate_url on create/update
    url_fields: frozenset[str] = field(default_factory=frozenset)


@dataclass
class PageResult(Generic[OutputT]):
    items: list[OutputT]
    total: int
    page: int
    limit: int


class OwnedCRUDService(Generic[ModelT, OutputT]):
    """
    Generic CRUD for one owned collection.

    Every id-addressed operation fetches by id without an owner filter and
    then runs the ownership guard, so a missing record raises NotFoundError
    and a foreign one raises ForbiddenError.
    """

    def __init__(self, db: Session, config: EntityConfig):
        self._db = db
        self._config = config
        self._repo: SoftDeleteRepository[ModelT] = SoftDeleteRepository(config.model, db)

    @property
    def db(self) -> Session:
        """Database session."""
        return self._db

    @property
    def repo(self) -> SoftDeleteRepository[ModelT]:
        """Repository for data access."""
        return self._repo

    @property
    def config(self) -> EntityConfig:
        return self._config

    @property
    def entity_name(self) -> str:
        """Human-readable entity name for messages."""
        return self._config.entity_name

    @property
    def model(self) -> type[ModelT]:
        return self._config.model

    # =========================================================================
    # Read Operations
    # =========================================================================

    def find_all(
        self,
        owner_id: str,
        page: int = 1,
        limit: int | None = None,
        mode: DeletedMode = DeletedMode.ACTIVE,
        *,
        max_limit: int | None = None,
        **filters: Any,
    ) -> PageResult[OutputT]:
        """
        List one page of the owner's records.

        Args:
            owner_id: Owner whose records are listed.
            page: 1-based page number.
            limit: Page size, clamped to [1, max_limit].
            mode: Soft delete mode.
            max_limit: Upper bound for limit (defaults to settings.max_page_size).
            **filters: Collection-specific filters (see EntityConfig.filter_fields).
        """
        validate_owner_id(owner_id)
        max_limit = max_limit or settings.max_page_size
        limit = min(max(1, limit or settings.default_page_size), max_limit)
        page = max(1, page)

        column_filters = {"owner_id": owner_id, **self._build_filters(filters)}
        criteria = self._build_criteria(filters)

        total = self._repo.count(column_filters, criteria=criteria, mode=mode)
        entities = self._repo.find_many(
            column_filters,
            criteria=criteria,
            mode=mode,
            order_by=self._sort_expressions(),
            offset=(page - 1) * limit,
            limit=limit,
        )
        return PageResult(
            items=self.to_outputs(entities),
            total=total,
            page=page,
            limit=limit,
        )

    def list_active(self, owner_id: str, **filters: Any) -> list[OutputT]:
        """All active records of the owner in default order, unpaginated."""
        validate_owner_id(owner_id)
        column_filters = {"owner_id": owner_id, **self._build_filters(filters)}
        entities = self._repo.find_many(
            column_filters,
            criteria=self._build_criteria(filters),
            order_by=self._sort_expressions(),
        )
        return self.to_outputs(entities)

    def find_one(
        self,
        owner_id: str,
        entity_id: str,
        mode: DeletedMode = DeletedMode.ACTIVE,
    ) -> OutputT:
        """
        Get one record.

        Raises:
            NotFoundError: Missing, or excluded by mode (soft-deleted rows
                are only visible under ALL or DELETED_ONLY).
            ForbiddenError: Owned by someone else.
        """
        return self.to_output(self.get_owned(owner_id, entity_id, mode=mode))

    def get_owned(
        self,
        owner_id: str,
        entity_id: str,
        mode: DeletedMode = DeletedMode.ACTIVE,
    ) -> ModelT:
        """Fetch by id, then check ownership. Returns the raw entity."""
        validate_owner_id(owner_id)
        entity = self._repo.find_by_id(entity_id, mode=mode)
        return assert_owned(entity, owner_id, self.entity_name, entity_id)

    # =========================================================================
    # Write Operations
    # =========================================================================

    def create(self, owner_id: str, payload: BaseModel | dict[str, Any]) -> OutputT:
        """
        Create a record for owner_id.

        Raises:
            InvalidInputError: A business rule rejected the payload.
        """
        validate_owner_id(owner_id)
        data = self._payload_dict(payload, partial=False)
        data = self._validate_urls(data)
        data = self._prepare_create(owner_id, data)
        self._validate(data)

        entity = self.model(**data, owner_id=owner_id)
        self._repo.insert(entity)
        self._commit()

        logger.info(
            f"{self.entity_name} created",
            entity_id=entity.id,
            owner=mask_owner_id(owner_id),
        )
        self._after_create(entity)
        return self.to_output(entity)

    def update(self, owner_id: str, entity_id: str, payload: BaseModel | dict[str, Any]) -> OutputT:
        """
        Apply a partial update. Only supplied fields change; rules are checked
        against the merged (stored + patch) values.

        Raises:
            NotFoundError, ForbiddenError, InvalidInputError, ConflictError
        """
        entity = self.get_owned(owner_id, entity_id)

        data = self._payload_dict(payload, partial=True)
        data = self._drop_nulls_for_required(data)
        data = self._validate_urls(data)
        data = self._prepare_update(entity, data)
        self._validate({**self._current_values(entity), **data})

        for field_name, value in data.items():
            setattr(entity, field_name, value)

        self._repo.save(entity)
        self._commit()

        logger.info(f"{self.entity_name} updated", entity_id=entity.id, fields=sorted(data))
        return self.to_output(entity)

    def remove(self, owner_id: str, entity_id: str) -> None:
        """
        Delete one record: soft or physical per EntityConfig.soft_delete.

        A second call on the same id raises NotFoundError.
        """
        entity = self.get_owned(owner_id, entity_id)

        if self._config.soft_delete:
            self._repo.soft_delete(entity)
        else:
            self._repo.hard_delete(entity)
        self._commit()

        logger.info(
            f"{self.entity_name} deleted",
            entity_id=entity_id,
            soft=self._config.soft_delete,
        )

    def restore(self, owner_id: str, entity_id: str) -> OutputT:
        """
        Bring back a soft-deleted record.

        Raises:
            NotFoundError: No soft-deleted record with this id.
            ForbiddenError: Owned by someone else.
        """
        self._require_soft_delete()
        entity = self.get_owned(owner_id, entity_id, mode=DeletedMode.DELETED_ONLY)
        self._repo.restore(entity)
        self._commit()

        logger.info(f"{self.entity_name} restored", entity_id=entity_id)
        return self.to_output(entity)

    def bulk_delete(self, owner_id: str, ids: Sequence[str]) -> BulkDeleteResult:
        """Best-effort delete of each id; failures are reported, not raised."""
        validate_owner_id(owner_id)
        return bulk_delete(self._repo, owner_id, ids, hard=not self._config.soft_delete)

    def bulk_restore(self, owner_id: str, ids: Sequence[str]) -> BulkRestoreResult:
        """Best-effort restore of each soft-deleted id."""
        self._require_soft_delete()
        validate_owner_id(owner_id)
        return bulk_restore(self._repo, owner_id, ids)

    def reorder(self, owner_id: str, ids: Sequence[str]) -> None:
        """
        Set order = position for each id.

        Raises:
            ForbiddenError: Some id is missing, foreign, deleted or repeated.
                Nothing is written in that case.
        """
        if not self._config.orderable:
            raise InvalidInputError(f"{self.entity_name} records cannot be reordered")
        validate_owner_id(owner_id)
        reorder(self._repo, owner_id, ids, self.entity_name)

    def delete_all_by_owner(self, owner_id: str) -> int:
        """Physically remove all of the owner's records. Used by account cleanup."""
        validate_owner_id(owner_id)
        removed = self._repo.delete_all_by_owner(owner_id)
        self._commit()
        logger.info(
            f"{self.entity_name} records purged",
            owner=mask_owner_id(owner_id),
            removed=removed,
        )
        return removed

    # =========================================================================
    # Transformation
    # =========================================================================

    def to_output(self, entity: ModelT) -> OutputT:
        """
        Convert entity to output DTO.

        Override this method for custom transformation logic.
        """
        return self._config.output_schema.model_validate(entity)  # type: ignore[return-value]

    def to_outputs(self, entities: Sequence[ModelT]) -> list[OutputT]:
        return [self.to_output(e) for e in entities]

    # =========================================================================
    # Hooks (override in subclasses)
    # =========================================================================

    def _validate(self, values: dict[str, Any]) -> None:
        """
        Check business rules against complete values (create data, or stored
        values merged with the patch on update).

        Raises:
            InvalidInputError: If a rule is violated.
        """
        pass

    def _prepare_create(self, owner_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Adjust create data before validation (derived fields)."""
        return data

    def _prepare_update(self, entity: ModelT, data: dict[str, Any]) -> dict[str, Any]:
        """Adjust patch data before validation (derived fields)."""
        return data

    def _after_create(self, entity: ModelT) -> None:
        """Hook called after entity creation."""
        pass

    def _build_filters(self, filters: dict[str, Any]) -> dict[str, Any]:
        """Map find_all keyword filters to column equality filters."""
        return {
            name: value
            for name, value in filters.items()
            if name in self._config.filter_fields and value is not None
        }

    def _build_criteria(self, filters: dict[str, Any]) -> list[Any]:
        """Extra SQL criteria for filters that are not plain equality."""
        return []

    # =========================================================================
    # Internal Helpers
    # =========================================================================

    def _sort_expressions(self) -> list[Any]:
        expressions = []
        for key in self._config.default_sort:
            descending = key.startswith("-")
            column = getattr(self.model, key.lstrip("-"))
            expressions.append(column.desc().nulls_last() if descending else column.asc())
        return expressions

    def _commit(self) -> None:
        """Commit, turning unique-constraint races into ConflictError."""
        try:
            safe_commit(self._db)
        except IntegrityError as e:
            raise ConflictError(
                f"{self.entity_name} conflicts with an existing record",
                error=str(e.orig),
            ) from e

    def _require_soft_delete(self) -> None:
        if not self._config.soft_delete:
            raise InvalidInputError(f"{self.entity_name} records are deleted permanently")

    def _payload_dict(self, payload: BaseModel | dict[str, Any], *, partial: bool) -> dict[str, Any]:
        if isinstance(payload, BaseModel):
            data = payload.model_dump(exclude_unset=partial)
        else:
            data = dict(payload)
        columns = self._column_names()
        unknown = set(data) - columns
        if unknown:
            raise InvalidInputError(f"Unknown fields: {', '.join(sorted(unknown))}")
        # System-managed fields
        for name in ("id", "owner_id", "created_at", "updated_at", "deleted_at"):
            data.pop(name, None)
        return data

    def _drop_nulls_for_required(self, data: dict[str, Any]) -> dict[str, Any]:
        """An explicit null on a NOT NULL column means "leave unchanged"."""
        table = self.model.__table__
        return {
            name: value
            for name, value in data.items()
            if value is not None or table.c[name].nullable
        }

    def _validate_urls(self, data: dict[str, Any]) -> dict[str, Any]:
        """Validate and normalize link fields."""
        for field_name in self._config.url_fields:
            if data.get(field_name):
                try:
                    data[field_name] = validate_url(data[field_name])
                except ValueError as e:
                    raise InvalidInputError(str(e), field=field_name)
        return data

    def _column_names(self) -> set[str]:
        return {column.key for column in self.model.__table__.columns}

    def _current_values(self, entity: ModelT) -> dict[str, Any]:
        return {name: getattr(entity, name) for name in self._column_names()}
