"""
Slug derivation for human-readable identifiers.
"""

import re
from collections.abc import Callable

from shared.config.constants import Limits

FALLBACK_SLUG = "post"

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """
    Lowercase, trim, collapse every run of non-alphanumeric characters into a
    single hyphen and strip leading/trailing hyphens.

        >>> slugify("  Hello,   World! ")
        'hello-world'
    """
    slug = _NON_ALNUM.sub("-", text.strip().lower()).strip("-")
    slug = slug[: Limits.MAX_SLUG_LENGTH].rstrip("-")
    return slug or FALLBACK_SLUG


def unique_slug(candidate: str, exists: Callable[[str], bool]) -> str:
    """
    Return candidate if free, else the first free candidate-2, candidate-3, ...

    Args:
        candidate: Already slugified base value.
        exists: Returns True when a slug is taken. Callers exclude the record
            being updated so a post never collides with itself.
    """
    if not exists(candidate):
        return candidate

    suffix = 2
    while exists(_with_suffix(candidate, suffix)):
        suffix += 1
    return _with_suffix(candidate, suffix)


def _with_suffix(base: str, suffix: int) -> str:
    # The suffixed slug stays within MAX_SLUG_LENGTH
    tail = f"-{suffix}"
    head = base[: Limits.MAX_SLUG_LENGTH - len(tail)].rstrip("-")
    return f"{head or FALLBACK_SLUG}{tail}"
