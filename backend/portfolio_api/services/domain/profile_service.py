"""
Profile Service.

One profile row per owner. get_or_create() is the only read that writes:
it inserts a row with default settings the first time an owner is seen.
get_visibility() never writes and falls back to the defaults.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from portfolio_api.models import Profile
from portfolio_api.schemas import ProfileOutput, VisibilityOutput
from shared.config.logging import get_logger, mask_owner_id
from shared.infrastructure.db import safe_commit, translate_db_errors
from shared.utils.exceptions import InvalidInputError
from shared.utils.validators import validate_owner_id, validate_url

logger = get_logger(__name__)

URL_FIELDS = ("avatar", "resume_url", "portfolio_url")
SYSTEM_FIELDS = ("id", "owner_id", "created_at", "updated_at")


class ProfileService:
    """Service for the per-owner profile and its visibility flags."""

    def __init__(self, db: Session):
        self._db = db

    # =========================================================================
    # Query Methods
    # =========================================================================

    def find(self, owner_id: str) -> Profile | None:
        """The owner's profile row, if any. Never writes."""
        validate_owner_id(owner_id)
        with translate_db_errors(self._db):
            return self._db.scalar(select(Profile).where(Profile.owner_id == owner_id))

    def get_or_create(self, owner_id: str) -> ProfileOutput:
        """
        Return the owner's profile, inserting one with defaults if missing.

        Side effect: writes on the first call for an owner.
        """
        return ProfileOutput.model_validate(self._get_or_create_entity(owner_id))

    def get_visibility(self, owner_id: str) -> VisibilityOutput:
        """Visibility flags; defaults when the owner has no profile. Never writes."""
        profile = self.find(owner_id)
        if profile is None:
            return VisibilityOutput()
        return VisibilityOutput.model_validate(profile)

    # =========================================================================
    # Command Methods
    # =========================================================================

    def update(self, owner_id: str, payload: BaseModel | dict[str, Any]) -> ProfileOutput:
        """Upsert: only supplied fields change."""
        if isinstance(payload, BaseModel):
            data = payload.model_dump(exclude_unset=True)
        else:
            data = dict(payload)

        profile = self._get_or_create_entity(owner_id)
        table = Profile.__table__
        for field_name, value in data.items():
            if field_name not in table.c or field_name in SYSTEM_FIELDS:
                raise InvalidInputError(f"Unknown field: {field_name}", field=field_name)
            if value is None and not table.c[field_name].nullable:
                continue
            if field_name in URL_FIELDS:
                value = self._checked_url(field_name, value)
            setattr(profile, field_name, value)

        safe_commit(self._db)
        logger.info("Profile updated", owner=mask_owner_id(owner_id), fields=sorted(data))
        return ProfileOutput.model_validate(profile)

    def update_avatar(self, owner_id: str, url: str) -> ProfileOutput:
        """Set the avatar URL (already stored by the media service)."""
        return self.update(owner_id, {"avatar": url})

    def update_resume(self, owner_id: str, url: str) -> ProfileOutput:
        """Set the resume URL (already stored by the media service)."""
        return self.update(owner_id, {"resume_url": url})

    def delete_by_owner(self, owner_id: str) -> bool:
        """Remove the owner's profile. Returns False when there was none."""
        validate_owner_id(owner_id)
        with translate_db_errors(self._db):
            result = self._db.execute(delete(Profile).where(Profile.owner_id == owner_id))
        safe_commit(self._db)
        return (result.rowcount or 0) > 0

    # =========================================================================
    # Internal Helpers
    # =========================================================================

    def _get_or_create_entity(self, owner_id: str) -> Profile:
        profile = self.find(owner_id)
        if profile is not None:
            return profile

        profile = Profile(owner_id=owner_id)
        self._db.add(profile)
        try:
            safe_commit(self._db)
        except IntegrityError:
            # A concurrent request created it first
            profile = self.find(owner_id)
            if profile is None:
                raise
            return profile

        logger.info("Profile created with defaults", owner=mask_owner_id(owner_id))
        return profile

    @staticmethod
    def _checked_url(field_name: str, value: str | None) -> str | None:
        try:
            return validate_url(value)
        except ValueError as e:
            raise InvalidInputError(str(e), field=field_name)
