"""
Company Service.

Companies are deleted permanently. Experiences that reference a deleted
company keep their company_id; it simply stops resolving.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from portfolio_api.models import Company
from portfolio_api.schemas import CompanyOutput
from portfolio_api.services.base_service import EntityConfig, OwnedCRUDService
from shared.config.constants import Collections


class CompanyService(OwnedCRUDService[Company, CompanyOutput]):
    def __init__(self, db: Session):
        super().__init__(
            db,
            EntityConfig(
                model=Company,
                output_schema=CompanyOutput,
                entity_name="Company",
                collection=Collections.COMPANIES,
                soft_delete=False,
                default_sort=("name",),
                url_fields=frozenset({"logo", "website"}),
            ),
        )

    def find_owned_map(self, owner_id: str, company_ids: set[str]) -> dict[str, Company]:
        """Active companies of owner_id among company_ids, keyed by id."""
        if not company_ids:
            return {}
        companies = self.repo.find_by_ids(list(company_ids), owner_id=owner_id)
        return {company.id: company for company in companies}
