"""
Skill Service.

Business rules:
- category must be one of SkillCategory.ALL
- Skills are soft deleted and explicitly ordered within the owner's list
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from portfolio_api.models import Skill
from portfolio_api.schemas import SkillOutput
from portfolio_api.services.base_service import EntityConfig, OwnedCRUDService
from shared.config.constants import Collections, SkillCategory
from shared.utils.validators import validate_choice


class SkillService(OwnedCRUDService[Skill, SkillOutput]):
    """Service for skills."""

    def __init__(self, db: Session):
        super().__init__(
            db,
            EntityConfig(
                model=Skill,
                output_schema=SkillOutput,
                entity_name="Skill",
                collection=Collections.SKILLS,
                soft_delete=True,
                orderable=True,
                default_sort=("category", "order", "created_at"),
                filter_fields=("category",),
            ),
        )

    @staticmethod
    def categories() -> list[str]:
        """The allowed skill categories, in display order."""
        return list(SkillCategory.ALL)

    def find_grouped(self, owner_id: str) -> dict[str, list[SkillOutput]]:
        """Active skills grouped by category. Empty categories are left out."""
        grouped: dict[str, list[SkillOutput]] = {}
        for skill in self.list_active(owner_id):
            grouped.setdefault(skill.category, []).append(skill)
        return grouped

    def _validate(self, values: dict[str, Any]) -> None:
        validate_choice(values.get("category"), SkillCategory.ALL, field="category")
