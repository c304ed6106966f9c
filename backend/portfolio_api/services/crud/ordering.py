"""
Explicit display ordering for orderable collections.
"""

from collections.abc import Sequence

from shared.config.logging import get_logger, mask_owner_id
from shared.infrastructure.db import safe_commit
from shared.utils.exceptions import ForbiddenError

from .repository import SoftDeleteRepository

logger = get_logger(__name__)


def reorder(
    repo: SoftDeleteRepository,
    owner_id: str,
    ordered_ids: Sequence[str],
    entity_name: str,
) -> None:
    """
    Assign order = index (0-based) to each id in ordered_ids.

    All ids must resolve to active rows owned by owner_id; otherwise nothing
    is written and ForbiddenError is raised. Missing, foreign, deleted and
    duplicate ids all make the resolved count differ from len(ordered_ids).
    Rows not mentioned keep their current order.

    Each position is an independent single-row write; concurrent reorders of
    the same collection are not serialized.
    """
    resolved = repo.find_by_ids(ordered_ids, owner_id=owner_id)
    if len(resolved) != len(ordered_ids):
        logger.warning(
            "Reorder rejected",
            entity=entity_name,
            owner=mask_owner_id(owner_id),
            requested=len(ordered_ids),
            resolved=len(resolved),
        )
        raise ForbiddenError(entity_name)

    for index, entity_id in enumerate(ordered_ids):
        repo.set_order(entity_id, owner_id, index)
        safe_commit(repo.session)

    logger.info("Collection reordered", entity=entity_name, count=len(ordered_ids))
