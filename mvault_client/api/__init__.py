"""API layer with typed interfaces for the Membership Vault endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .memberships_api import MembershipsApi


def __getattr__(name: str):
    """Lazy import of API classes to avoid circular import with HttpClient."""
    if name == "MembershipsApi":
        from .memberships_api import MembershipsApi

        return MembershipsApi
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["MembershipsApi"]
