"""
Project Service.

Business rules:
- Projects are soft deleted and can be restored
- Display order is explicit (reorder)
- Optional start/end dates must be in order
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from portfolio_api.models import Project
from portfolio_api.schemas import ProjectOutput
from portfolio_api.services.base_service import EntityConfig, OwnedCRUDService
from shared.config.constants import Collections
from shared.utils.validators import validate_date_range


class ProjectService(OwnedCRUDService[Project, ProjectOutput]):
    """Service for portfolio projects."""

    def __init__(self, db: Session):
        super().__init__(
            db,
            EntityConfig(
                model=Project,
                output_schema=ProjectOutput,
                entity_name="Project",
                collection=Collections.PROJECTS,
                soft_delete=True,
                orderable=True,
                default_sort=("order", "-created_at"),
                filter_fields=("featured",),
                url_fields=frozenset({"image", "url", "github_url"}),
            ),
        )

    def _validate(self, values: dict[str, Any]) -> None:
        validate_date_range(values.get("start_date"), values.get("end_date"))
