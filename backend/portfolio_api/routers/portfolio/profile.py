"""
Profile endpoints for the authenticated owner.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from portfolio_api.schemas import ProfileOutput, ProfileUpdate, UrlInput, VisibilityOutput
from portfolio_api.services.domain import ProfileService
from shared.infrastructure.db import get_db
from shared.security.auth import current_owner_id


router = APIRouter(prefix="/profile", tags=["portfolio-profile"])


@router.get("", response_model=ProfileOutput)
def get_profile(
    db: Session = Depends(get_db),
    owner_id: str = Depends(current_owner_id),
) -> ProfileOutput:
    """Get the owner's profile, creating it with defaults on first access."""
    return ProfileService(db).get_or_create(owner_id)


@router.get("/visibility", response_model=VisibilityOutput)
def get_visibility(
    db: Session = Depends(get_db),
    owner_id: str = Depends(current_owner_id),
) -> VisibilityOutput:
    return ProfileService(db).get_visibility(owner_id)


@router.patch("", response_model=ProfileOutput)
def update_profile(
    body: ProfileUpdate,
    db: Session = Depends(get_db),
    owner_id: str = Depends(current_owner_id),
) -> ProfileOutput:
    """Update profile fields. Only supplied fields change."""
    return ProfileService(db).update(owner_id, body)


@router.put("/avatar", response_model=ProfileOutput)
def set_avatar(
    body: UrlInput,
    db: Session = Depends(get_db),
    owner_id: str = Depends(current_owner_id),
) -> ProfileOutput:
    return ProfileService(db).update_avatar(owner_id, body.url)


@router.put("/resume", response_model=ProfileOutput)
def set_resume(
    body: UrlInput,
    db: Session = Depends(get_db),
    owner_id: str = Depends(current_owner_id),
) -> ProfileOutput:
    return ProfileService(db).update_resume(owner_id, body.url)
