"""
Best-effort bulk operations.

Each id is an independent conditional write (id + owner + deletion state),
committed on its own. A failing id is reported, never raised, and never
aborts the rest of the batch.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from shared.config.logging import get_logger
from shared.infrastructure.db import safe_commit

from .repository import SoftDeleteRepository

logger = get_logger(__name__)


@dataclass
class BulkDeleteResult:
    deleted_count: int = 0
    failed_ids: list[str] = field(default_factory=list)


@dataclass
class BulkRestoreResult:
    restored_count: int = 0
    failed_ids: list[str] = field(default_factory=list)


def bulk_delete(
    repo: SoftDeleteRepository,
    owner_id: str,
    ids: Sequence[str],
    *,
    hard: bool = False,
) -> BulkDeleteResult:
    """
    Delete each id owned by owner_id that is still active.

    Missing, foreign, already deleted and repeated ids land in failed_ids.
    """
    result = BulkDeleteResult()
    delete_one = repo.hard_delete_owned if hard else repo.soft_delete_owned

    for entity_id in ids:
        if delete_one(entity_id, owner_id):
            safe_commit(repo.session)
            result.deleted_count += 1
        else:
            result.failed_ids.append(entity_id)

    logger.info(
        "Bulk delete finished",
        entity=repo.model.__name__,
        deleted=result.deleted_count,
        failed=len(result.failed_ids),
        hard=hard,
    )
    return result


def bulk_restore(
    repo: SoftDeleteRepository,
    owner_id: str,
    ids: Sequence[str],
) -> BulkRestoreResult:
    """Restore each soft-deleted id owned by owner_id."""
    result = BulkRestoreResult()

    for entity_id in ids:
        if repo.restore_owned(entity_id, owner_id):
            safe_commit(repo.session)
            result.restored_count += 1
        else:
            result.failed_ids.append(entity_id)

    logger.info(
        "Bulk restore finished",
        entity=repo.model.__name__,
        restored=result.restored_count,
        failed=len(result.failed_ids),
    )
    return result
