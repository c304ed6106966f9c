"""
Certification Service.

Outputs carry a status derived from expiry_date (see
shared.utils.validators.certification_status).
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from portfolio_api.models import Certification
from portfolio_api.schemas import CertificationOutput
from portfolio_api.services.base_service import EntityConfig, OwnedCRUDService
from shared.config.constants import Collections
from shared.utils.validators import validate_date_range


class CertificationService(OwnedCRUDService[Certification, CertificationOutput]):
    def __init__(self, db: Session):
        super().__init__(
            db,
            EntityConfig(
                model=Certification,
                output_schema=CertificationOutput,
                entity_name="Certification",
                collection=Collections.CERTIFICATIONS,
                soft_delete=False,
                default_sort=("-issue_date", "-created_at"),
                url_fields=frozenset({"credential_url"}),
            ),
        )

    def _validate(self, values: dict[str, Any]) -> None:
        validate_date_range(
            values.get("issue_date"),
            values.get("expiry_date"),
            message="issue date must be before expiry date",
            field="expiry_date",
        )
