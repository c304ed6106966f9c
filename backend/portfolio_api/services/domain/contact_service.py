"""
Contact Service.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from portfolio_api.models import Contact
from portfolio_api.schemas import ContactOutput
from portfolio_api.services.base_service import EntityConfig, OwnedCRUDService
from shared.config.constants import Collections


class ContactService(OwnedCRUDService[Contact, ContactOutput]):
    def __init__(self, db: Session):
        super().__init__(
            db,
            EntityConfig(
                model=Contact,
                output_schema=ContactOutput,
                entity_name="Contact",
                collection=Collections.CONTACTS,
                soft_delete=False,
                orderable=True,
                default_sort=("-active", "order", "-created_at"),
            ),
        )

    def _build_filters(self, filters: dict[str, Any]) -> dict[str, Any]:
        # active_only=False means no filter, not active == False
        if filters.get("active_only"):
            return {"active": True}
        return {}
