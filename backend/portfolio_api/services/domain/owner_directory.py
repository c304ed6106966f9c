"""
Owner directory: maps a public handle to an owner ID.

The public API only receives a handle. Resolving it belongs to the identity
side of the system; this module defines the seam and a default that treats
the handle as the owner ID itself.
"""

from __future__ import annotations

from typing import Protocol


class OwnerDirectory(Protocol):
    def resolve(self, handle: str) -> str | None:
        """Return the owner ID for handle, or None when unknown."""
        ...


class IdentityOwnerDirectory:
    """Default directory: the handle is the owner ID."""

    def resolve(self, handle: str) -> str | None:
        handle = handle.strip()
        return handle or None


def get_owner_directory() -> OwnerDirectory:
    """
    FastAPI dependency returning the directory. Deployments and tests swap it
    through app.dependency_overrides.
    """
    return IdentityOwnerDirectory()
