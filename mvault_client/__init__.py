"""
MVault client SDK - Python client for the PBS Membership Vault API.

This package provides an async client for reading and managing station
memberships in the Membership Vault: single membership lookups, creation,
updates, activation and deletion, and lazily paged membership listings.
"""

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

import httpx

from .api.memberships_api import MembershipsApi
from .errors import (
    ActivationConflictError,
    AnotherMembershipActivatedError,
    BadRequestError,
    ConfigurationError,
    ConnectionError,
    MembershipActivatedError,
    MembershipNotFoundError,
    MvaultError,
    UnexpectedResponseError,
)
from .models.activation import AnotherMembershipActivated, MembershipAlreadyActivated
from .models.config import LIVE_URL, STAGING_URL, MvaultClientConfig
from .models.pagination import CollectionInfo, PageEnvelope
from .utils.config_loader import load_config
from .utils.http_client import HttpClient
from .utils.paged_response import PagedResponse
from .utils.results import Results

__version__ = "0.1.0"
__license__ = "MIT"


class MvaultClient:
    """
    Main MVault client class.

    This client provides a unified interface for:
    - Membership lookups by ID or token
    - Membership creation, update, activation and deletion
    - Filtered membership listings returned as lazy Results
    """

    def __init__(
        self,
        config: MvaultClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize MvaultClient with configuration.

        Args:
            config: Client configuration (API key, secret, station ID, etc.)
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        self.config = config
        self.http_client = HttpClient(config, transport=transport)
        self.memberships = MembershipsApi(self.http_client)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.http_client.close()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    # ==================== GENERIC QUERIES ====================

    async def get(self, endpoint: str, query: Optional[Mapping[str, Any]] = None) -> Results:
        """Get a lazy record sequence for any list endpoint."""
        return await self.http_client.get(endpoint, query)

    async def get_one(
        self, endpoint: str, query: Optional[Mapping[str, Any]] = None
    ) -> Optional[Any]:
        """Get a single object, or None if the API has none."""
        return await self.http_client.get_one(endpoint, query)

    async def get_all(
        self, endpoint: str, query: Optional[Mapping[str, Any]] = None
    ) -> List[Any]:
        """Get every record of a list endpoint."""
        return await self.http_client.get_all(endpoint, query)

    # ==================== MEMBERSHIPS ====================

    async def get_membership_by_id(self, membership_id: str) -> Dict[str, Any]:
        """Get a membership by ID (raises MembershipNotFoundError)."""
        return await self.memberships.get_membership_by_id(membership_id)

    async def get_membership_by_token(self, token: str) -> Dict[str, Any]:
        """Get a membership by activation token (raises MembershipNotFoundError)."""
        return await self.memberships.get_membership_by_token(token)

    async def add_membership(
        self,
        membership_id: str,
        first_name: str,
        last_name: str,
        offer: str,
        start_date: datetime,
        expire_date: datetime,
        **additional_fields: Any,
    ) -> Dict[str, Any]:
        """Create a membership."""
        return await self.memberships.add_membership(
            membership_id,
            first_name,
            last_name,
            offer,
            start_date,
            expire_date,
            **additional_fields,
        )

    async def update_membership(self, membership_id: str, fields: Dict[str, Any]) -> bool:
        """Update fields of a membership."""
        return await self.memberships.update_membership(membership_id, fields)

    async def activate_membership(self, membership_id: str, uid: str) -> bool:
        """Activate a membership for a PBS Account."""
        return await self.memberships.activate_membership(membership_id, uid)

    async def delete_membership(self, membership_id: str) -> bool:
        """Delete a membership."""
        return await self.memberships.delete_membership(membership_id)

    async def get_all_memberships(self, since: Optional[datetime] = None) -> Results:
        """Get all memberships."""
        return await self.memberships.get_all_memberships(since)

    async def get_active_memberships(
        self,
        email: Optional[str] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> Results:
        """Get active memberships."""
        return await self.memberships.get_active_memberships(email, start_date, end_date)

    async def get_memberships_by_email(self, email: str) -> Results:
        """Get memberships by email address."""
        return await self.memberships.get_memberships_by_email(email)

    async def get_memberships_by_uid(self, uid: str) -> Results:
        """Get memberships by PBS Account UID."""
        return await self.memberships.get_memberships_by_uid(uid)

    async def get_activated_memberships(self, since: Optional[datetime] = None) -> Results:
        """Get activated memberships."""
        return await self.memberships.get_activated_memberships(since)

    async def get_provisional_memberships(self, since: Optional[datetime] = None) -> Results:
        """Get provisional memberships."""
        return await self.memberships.get_provisional_memberships(since)

    async def get_grace_period_memberships(self) -> Results:
        """Get memberships in their grace period."""
        return await self.memberships.get_grace_period_memberships()

    async def get_deleted_memberships(self, since: Optional[datetime] = None) -> Results:
        """Get deleted memberships."""
        return await self.memberships.get_deleted_memberships(since)


__all__ = [
    "MvaultClient",
    "MvaultClientConfig",
    "LIVE_URL",
    "STAGING_URL",
    "load_config",
    "HttpClient",
    "MembershipsApi",
    "PagedResponse",
    "Results",
    "PageEnvelope",
    "CollectionInfo",
    "AnotherMembershipActivated",
    "MembershipAlreadyActivated",
    "MvaultError",
    "BadRequestError",
    "ActivationConflictError",
    "MembershipActivatedError",
    "AnotherMembershipActivatedError",
    "MembershipNotFoundError",
    "UnexpectedResponseError",
    "ConnectionError",
    "ConfigurationError",
]
