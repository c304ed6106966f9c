"""
Education Service.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from portfolio_api.models import Education
from portfolio_api.schemas import EducationOutput
from portfolio_api.services.base_service import EntityConfig, OwnedCRUDService
from shared.config.constants import Collections
from shared.utils.validators import validate_date_range


class EducationService(OwnedCRUDService[Education, EducationOutput]):
    def __init__(self, db: Session):
        super().__init__(
            db,
            EntityConfig(
                model=Education,
                output_schema=EducationOutput,
                entity_name="Education",
                collection=Collections.EDUCATION,
                soft_delete=True,
                default_sort=("-start_date", "-created_at"),
            ),
        )

    def _validate(self, values: dict[str, Any]) -> None:
        validate_date_range(values.get("start_date"), values.get("end_date"))
