"""
Ownership guard for id-addressed operations.

Callers fetch by id without an owner filter and then call assert_owned(), so
"does not exist" (NotFoundError) and "exists but belongs to someone else"
(ForbiddenError) stay distinct. Neither error names the real owner.
"""

from typing import TypeVar

from shared.config.logging import audit_ownership_denied
from shared.utils.exceptions import ForbiddenError, NotFoundError

T = TypeVar("T")


def assert_owned(record: T | None, owner_id: str, entity_name: str, entity_id: str | None = None) -> T:
    """
    Return the record unchanged if owner_id owns it.

    Raises:
        NotFoundError: record is None.
        ForbiddenError: record belongs to another owner.
    """
    if record is None:
        raise NotFoundError(entity_name, entity_id)

    if record.owner_id != owner_id:  # type: ignore[attr-defined]
        record_id = record.id  # type: ignore[attr-defined]
        audit_ownership_denied(entity_name, record_id, owner_id)
        raise ForbiddenError(entity_name, record_id)

    return record
