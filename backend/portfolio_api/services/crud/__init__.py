"""
CRUD primitives shared by every content collection.

Provides:
- SoftDeleteRepository / DeletedMode: data access with explicit deletion mode
- assert_owned: ownership guard (NotFound vs Forbidden)
- reorder: check-all-then-write display ordering
- bulk_delete / bulk_restore: per-id best-effort batches
- slugify / unique_slug: collision-safe slugs
"""

from .repository import SoftDeleteRepository, DeletedMode
from .ownership import assert_owned
from .ordering import reorder
from .bulk import BulkDeleteResult, BulkRestoreResult, bulk_delete, bulk_restore
from .slugs import slugify, unique_slug

__all__ = [
    "SoftDeleteRepository",
    "DeletedMode",
    "assert_owned",
    "reorder",
    "BulkDeleteResult",
    "BulkRestoreResult",
    "bulk_delete",
    "bulk_restore",
    "slugify",
    "unique_slug",
]
