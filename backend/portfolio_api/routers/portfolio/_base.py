"""
Shared dependencies and the route builder for owner-facing collection routers.

Every collection exposes the same endpoint set; add_collection_routes()
registers it on a router for one service class. Collection-specific routes
(e.g. /skills/grouped) must be registered before calling it so they win over
/{entity_id}.

Annotations here are evaluated at definition time: the schema classes are
closure variables that FastAPI must see as real types.
"""

from typing import Any, Callable

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from portfolio_api.routers._common.pagination import Pagination, get_pagination, page_output
from portfolio_api.schemas import (
    BulkDeleteOutput,
    BulkRestoreOutput,
    IdsInput,
    PageOutput,
    ReorderInput,
)
from portfolio_api.services.base_service import OwnedCRUDService
from portfolio_api.services.crud import DeletedMode
from shared.infrastructure.db import get_db
from shared.security.auth import current_owner_id


def no_filters() -> dict[str, Any]:
    return {}


def deleted_mode(include_deleted: bool = False, deleted_only: bool = False) -> DeletedMode:
    """Query parameters → soft delete mode."""
    if deleted_only:
        return DeletedMode.DELETED_ONLY
    if include_deleted:
        return DeletedMode.ALL
    return DeletedMode.ACTIVE


def add_collection_routes(
    router: APIRouter,
    *,
    path: str,
    service_class: type[OwnedCRUDService],
    output_schema: type[BaseModel],
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    filters: Callable[..., dict[str, Any]] = no_filters,
    soft_delete: bool = True,
    orderable: bool = False,
) -> APIRouter:
    """Register list/get/create/update/delete/bulk (+restore, +reorder) routes."""

    def get_service(db: Session = Depends(get_db)) -> OwnedCRUDService:
        return service_class(db)

    @router.get(f"/{path}", response_model=PageOutput[output_schema])
    def list_entities(
        pagination: Pagination = Depends(get_pagination),
        mode: DeletedMode = Depends(deleted_mode),
        type_filters: dict[str, Any] = Depends(filters),
        service: OwnedCRUDService = Depends(get_service),
        owner_id: str = Depends(current_owner_id),
    ):
        result = service.find_all(
            owner_id,
            page=pagination.page,
            limit=pagination.limit,
            mode=mode,
            **type_filters,
        )
        return page_output(result)

    @router.post(f"/{path}/bulk-delete", response_model=BulkDeleteOutput)
    def bulk_delete_entities(
        body: IdsInput,
        service: OwnedCRUDService = Depends(get_service),
        owner_id: str = Depends(current_owner_id),
    ):
        return service.bulk_delete(owner_id, body.ids)

    if soft_delete:

        @router.post(f"/{path}/bulk-restore", response_model=BulkRestoreOutput)
        def bulk_restore_entities(
            body: IdsInput,
            service: OwnedCRUDService = Depends(get_service),
            owner_id: str = Depends(current_owner_id),
        ):
            return service.bulk_restore(owner_id, body.ids)

    if orderable:

        @router.put(f"/{path}/reorder", status_code=status.HTTP_204_NO_CONTENT)
        def reorder_entities(
            body: ReorderInput,
            service: OwnedCRUDService = Depends(get_service),
            owner_id: str = Depends(current_owner_id),
        ) -> Response:
            service.reorder(owner_id, body.ids)
            return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.get(f"/{path}/{{entity_id}}", response_model=output_schema)
    def get_entity(
        entity_id: str,
        mode: DeletedMode = Depends(deleted_mode),
        service: OwnedCRUDService = Depends(get_service),
        owner_id: str = Depends(current_owner_id),
    ):
        return service.find_one(owner_id, entity_id, mode=mode)

    @router.post(f"/{path}", response_model=output_schema, status_code=status.HTTP_201_CREATED)
    def create_entity(
        body: create_schema,  # type: ignore[valid-type]
        service: OwnedCRUDService = Depends(get_service),
        owner_id: str = Depends(current_owner_id),
    ):
        return service.create(owner_id, body)

    @router.patch(f"/{path}/{{entity_id}}", response_model=output_schema)
    def update_entity(
        entity_id: str,
        body: update_schema,  # type: ignore[valid-type]
        service: OwnedCRUDService = Depends(get_service),
        owner_id: str = Depends(current_owner_id),
    ):
        return service.update(owner_id, entity_id, body)

    @router.delete(f"/{path}/{{entity_id}}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_entity(
        entity_id: str,
        service: OwnedCRUDService = Depends(get_service),
        owner_id: str = Depends(current_owner_id),
    ) -> Response:
        service.remove(owner_id, entity_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    if soft_delete:

        @router.post(f"/{path}/{{entity_id}}/restore", response_model=output_schema)
        def restore_entity(
            entity_id: str,
            service: OwnedCRUDService = Depends(get_service),
            owner_id: str = Depends(current_owner_id),
        ):
            return service.restore(owner_id, entity_id)

    return router
