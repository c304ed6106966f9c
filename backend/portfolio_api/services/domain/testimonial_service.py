"""
Testimonial Service.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from portfolio_api.models import Testimonial
from portfolio_api.schemas import TestimonialOutput
from portfolio_api.services.base_service import EntityConfig, OwnedCRUDService
from shared.config.constants import Collections
from shared.utils.validators import validate_rating


class TestimonialService(OwnedCRUDService[Testimonial, TestimonialOutput]):
    def __init__(self, db: Session):
        super().__init__(
            db,
            EntityConfig(
                model=Testimonial,
                output_schema=TestimonialOutput,
                entity_name="Testimonial",
                collection=Collections.TESTIMONIALS,
                soft_delete=False,
                orderable=True,
                default_sort=("-featured", "order", "-created_at"),
                filter_fields=("featured",),
                url_fields=frozenset({"avatar"}),
            ),
        )

    def _validate(self, values: dict[str, Any]) -> None:
        validate_rating(values.get("rating"))
