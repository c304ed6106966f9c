"""
Experience Service.

Business rules:
- start_date must not be after end_date
- A current position cannot have an end date
- company_id is a weak reference resolved at read time among the same
  owner's active companies; when it does not resolve, company_details is
  omitted from the output
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy.orm import Session

from portfolio_api.models import Company, Experience
from portfolio_api.schemas import CompanyOutput, ExperienceOutput
from portfolio_api.services.base_service import EntityConfig, OwnedCRUDService
from portfolio_api.services.domain.company_service import CompanyService
from shared.config.constants import Collections
from shared.utils.exceptions import InvalidInputError
from shared.utils.validators import validate_date_range


class ExperienceService(OwnedCRUDService[Experience, ExperienceOutput]):
    """Service for work experience entries."""

    def __init__(self, db: Session):
        super().__init__(
            db,
            EntityConfig(
                model=Experience,
                output_schema=ExperienceOutput,
                entity_name="Experience",
                collection=Collections.EXPERIENCES,
                soft_delete=True,
                default_sort=("-start_date", "-created_at"),
                filter_fields=("current",),
            ),
        )
        self._companies = CompanyService(db)

    # =========================================================================
    # Transformation
    # =========================================================================

    def to_output(self, entity: Experience) -> ExperienceOutput:
        return self.to_outputs([entity])[0]

    def to_outputs(self, entities: Sequence[Experience]) -> list[ExperienceOutput]:
        """Resolve company_details for a batch with one lookup per owner."""
        companies: dict[tuple[str, str], Company] = {}
        by_owner: dict[str, set[str]] = {}
        for entity in entities:
            if entity.company_id:
                by_owner.setdefault(entity.owner_id, set()).add(entity.company_id)
        for owner_id, company_ids in by_owner.items():
            for company_id, company in self._companies.find_owned_map(owner_id, company_ids).items():
                companies[(owner_id, company_id)] = company

        outputs = []
        for entity in entities:
            output = ExperienceOutput.model_validate(entity)
            company = companies.get((entity.owner_id, entity.company_id))
            if company is not None:
                output.company_details = CompanyOutput.model_validate(company)
            outputs.append(output)
        return outputs

    # =========================================================================
    # Validation Hooks
    # =========================================================================

    def _validate(self, values: dict[str, Any]) -> None:
        validate_date_range(values.get("start_date"), values.get("end_date"))
        if values.get("current") and values.get("end_date") is not None:
            raise InvalidInputError(
                "current experience cannot have an end date",
                field="end_date",
            )
