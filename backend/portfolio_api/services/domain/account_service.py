"""
Account Data Service - everything an owner has, across all collections.

delete_all() is best effort: each collection is purged independently; a
failure is logged and reported in the result while the others continue.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from portfolio_api.schemas import ProfileOutput
from shared.config.constants import Collections
from shared.config.logging import get_logger, mask_owner_id
from shared.utils.exceptions import AppException
from shared.utils.validators import validate_owner_id

from .profile_service import ProfileService
from .registry import SERVICE_CLASSES, get_service

logger = get_logger(__name__)


@dataclass
class AccountCleanupResult:
    removed: dict[str, int] = field(default_factory=dict)
    failed: list[str] = field(default_factory=list)


class AccountDataService:
    def __init__(self, db: Session):
        self._db = db

    def delete_all(self, owner_id: str) -> AccountCleanupResult:
        """Purge every collection and the profile of owner_id."""
        validate_owner_id(owner_id)
        result = AccountCleanupResult()

        for collection in SERVICE_CLASSES:
            try:
                result.removed[collection] = get_service(collection, self._db).delete_all_by_owner(owner_id)
            except (AppException, SQLAlchemyError) as e:
                self._db.rollback()
                logger.error(
                    "Account cleanup failed for collection",
                    collection=collection,
                    owner=mask_owner_id(owner_id),
                    error=str(e),
                )
                result.failed.append(collection)

        try:
            removed = ProfileService(self._db).delete_by_owner(owner_id)
            result.removed[Collections.PROFILE] = int(removed)
        except (AppException, SQLAlchemyError) as e:
            self._db.rollback()
            logger.error(
                "Account cleanup failed for profile",
                owner=mask_owner_id(owner_id),
                error=str(e),
            )
            result.failed.append(Collections.PROFILE)

        logger.info(
            "Account data deleted",
            owner=mask_owner_id(owner_id),
            removed=sum(result.removed.values()),
            failed=result.failed,
        )
        return result

    def export(self, owner_id: str) -> dict[str, Any]:
        """Every active record of owner_id, keyed by collection, plus the profile."""
        validate_owner_id(owner_id)
        profile = ProfileService(self._db).find(owner_id)

        data: dict[str, Any] = {
            Collections.PROFILE: ProfileOutput.model_validate(profile) if profile else None,
        }
        for collection in SERVICE_CLASSES:
            data[collection] = get_service(collection, self._db).list_active(owner_id)
        return data
