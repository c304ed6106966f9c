"""
Account data endpoints: delete or export everything the owner has stored.
"""

from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from portfolio_api.schemas import AccountCleanupOutput
from portfolio_api.services.domain import AccountDataService
from shared.infrastructure.db import get_db
from shared.security.auth import current_owner_id


router = APIRouter(prefix="/account-data", tags=["portfolio-account"])


@router.delete("", response_model=AccountCleanupOutput)
def delete_account_data(
    db: Session = Depends(get_db),
    owner_id: str = Depends(current_owner_id),
):
    """
    Remove all portfolio data of the owner.

    Best effort: collections that fail are listed in "failed".
    """
    return AccountDataService(db).delete_all(owner_id)


@router.get("/export")
def export_account_data(
    db: Session = Depends(get_db),
    owner_id: str = Depends(current_owner_id),
) -> dict[str, Any]:
    """Every active record of the owner, keyed by collection."""
    return AccountDataService(db).export(owner_id)
