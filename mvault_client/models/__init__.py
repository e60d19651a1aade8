"""Pydantic models for MVault client configuration and data types."""

from .activation import ActivationConflict, AnotherMembershipActivated, MembershipAlreadyActivated
from .config import LIVE_URL, STAGING_URL, MvaultClientConfig
from .pagination import CollectionInfo, PageEnvelope

__all__ = [
    "ActivationConflict",
    "AnotherMembershipActivated",
    "MembershipAlreadyActivated",
    "LIVE_URL",
    "STAGING_URL",
    "MvaultClientConfig",
    "CollectionInfo",
    "PageEnvelope",
]
