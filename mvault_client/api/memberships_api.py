"""Memberships API implementation.

Provides typed interfaces for the Membership Vault membership endpoints:
- Get/create/update/delete a membership (memberships/{id})
- Activate a membership for a PBS Account
- Filtered listings (memberships, memberships/filter/{predicate}[/{value}])

https://docs.pbs.org/display/MV/Membership+Vault+API
"""

from datetime import datetime
from typing import Any, Dict, Optional

from ..errors import BadRequestError, MembershipNotFoundError
from ..utils.activation_conflict import (
    ACTIVATION_CONFLICT_STATUS,
    conflict_error_for,
    parse_activation_conflict,
)
from ..utils.http_client import HttpClient
from ..utils.http_error_handler import NOT_FOUND_STATUS
from ..utils.results import Results


class MembershipsApi:
    """Memberships API client."""

    MEMBERSHIPS_ENDPOINT = "memberships"
    MEMBERSHIP_ENDPOINT = "memberships/{membership_id}"
    FILTER_ENDPOINT = "memberships/filter/{predicate}"

    # Field associating a membership with a PBS Account.
    ACCOUNT_FIELD = "uid"

    def __init__(self, http_client: HttpClient):
        """Initialize Memberships API client.

        Args:
            http_client: HttpClient instance

        """
        self.http_client = http_client

    def _membership_url(self, membership_id: str) -> str:
        return self.MEMBERSHIP_ENDPOINT.format(membership_id=membership_id)

    def _filter_url(self, predicate: Optional[str] = None, value: Optional[str] = None) -> str:
        if not predicate:
            return self.MEMBERSHIPS_ENDPOINT
        url = self.FILTER_ENDPOINT.format(predicate=predicate)
        if value is not None:
            url = f"{url}/{value}"
        return url

    async def _get_memberships(
        self,
        predicate: Optional[str] = None,
        value: Optional[str] = None,
        query: Optional[Dict[str, Any]] = None,
    ) -> Results:
        return await self.http_client.get(self._filter_url(predicate, value), query or {})

    # ==================== SINGLE MEMBERSHIPS ====================

    async def get_membership_by_id(self, membership_id: str) -> Dict[str, Any]:
        """Get a membership by its ID.

        Raises:
            MembershipNotFoundError: If no membership has this ID

        """
        membership = await self.http_client.get_one(self._membership_url(membership_id))
        if not membership:
            raise MembershipNotFoundError("id", membership_id)
        return membership

    async def get_membership_by_token(self, token: str) -> Dict[str, Any]:
        """Get a membership by its activation token.

        Raises:
            MembershipNotFoundError: If no membership has this token

        """
        membership = await self.http_client.get_one(self._filter_url("token", token))
        if not membership:
            raise MembershipNotFoundError("token", token)
        return membership

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
        """Create a membership.

        Args:
            membership_id: ID of the new membership
            first_name: Member first name
            last_name: Member last name
            offer: Offer (membership level) identifier
            start_date: Membership start date
            expire_date: Membership expiration date
            **additional_fields: Other membership fields (email, notes, ...)

        Returns:
            The created membership

        Raises:
            BadRequestError: If the ID is already in use or the API rejects the data

        """
        if await self.http_client.get_one(self._membership_url(membership_id)):
            raise BadRequestError(
                {"membership_id": [f"A membership with ID {membership_id} already exists."]},
                status_code=400,
            )

        data: Dict[str, Any] = {
            **additional_fields,
            "first_name": first_name,
            "last_name": last_name,
            "offer": offer,
            "start_date": start_date,
            "expire_date": expire_date,
        }
        response = await self.http_client.request(
            "PUT", self._membership_url(membership_id), json=data
        )
        return response.json() if response.content else {}

    async def update_membership(self, membership_id: str, fields: Dict[str, Any]) -> bool:
        """Update fields of a membership.

        Returns:
            True when the update is accepted

        Raises:
            MembershipNotFoundError: If no membership has this ID
            BadRequestError: If the API rejects the update

        """
        response = await self.http_client.request(
            "PATCH", self._membership_url(membership_id), json=fields
        )
        if response.status_code == NOT_FOUND_STATUS:
            raise MembershipNotFoundError("id", membership_id)
        return True

    async def activate_membership(self, membership_id: str, uid: str) -> bool:
        """Activate a membership for a PBS Account.

        Args:
            membership_id: Membership to activate
            uid: PBS Account UID

        Returns:
            True when the activation is accepted

        Raises:
            MembershipActivatedError: If another account already activated the membership
            AnotherMembershipActivatedError: If the account already activated another membership
            BadRequestError: For any other rejection
            MembershipNotFoundError: If no membership has this ID

        """
        try:
            return await self.update_membership(membership_id, {self.ACCOUNT_FIELD: uid})
        except BadRequestError as e:
            if e.status_code != ACTIVATION_CONFLICT_STATUS:
                raise
            conflict = parse_activation_conflict(e.general_messages())
            if conflict is None:
                raise
            raise conflict_error_for(conflict, e) from e

    async def delete_membership(self, membership_id: str) -> bool:
        """Delete a membership.

        Returns:
            True when the membership was deleted

        Raises:
            MembershipNotFoundError: If no membership has this ID

        """
        response = await self.http_client.request("DELETE", self._membership_url(membership_id))
        if response.status_code == NOT_FOUND_STATUS:
            raise MembershipNotFoundError("id", membership_id)
        return True

    # ==================== LISTINGS ====================

    async def get_all_memberships(self, since: Optional[datetime] = None) -> Results:
        """Get all memberships, optionally only those updated since a date."""
        return await self._get_memberships(query={"last_updated_since": since})

    async def get_active_memberships(
        self,
        email: Optional[str] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> Results:
        """Get active memberships, optionally filtered by email and date range."""
        return await self._get_memberships(
            "active",
            query={"email": email, "start_date": start_date, "end_date": end_date},
        )

    async def get_memberships_by_email(self, email: str) -> Results:
        """Get memberships with an email address."""
        return await self._get_memberships("email", email)

    async def get_memberships_by_uid(self, uid: str) -> Results:
        """Get memberships activated by a PBS Account."""
        return await self._get_memberships("uid", uid)

    async def get_activated_memberships(self, since: Optional[datetime] = None) -> Results:
        """Get activated memberships."""
        return await self._get_memberships("activated", query={"since": since})

    async def get_provisional_memberships(self, since: Optional[datetime] = None) -> Results:
        """Get provisional memberships."""
        return await self._get_memberships("provisional", query={"since": since})

    async def get_grace_period_memberships(self) -> Results:
        """Get memberships in their grace period."""
        return await self._get_memberships("grace_period")

    async def get_deleted_memberships(self, since: Optional[datetime] = None) -> Results:
        """Get deleted memberships."""
        return await self._get_memberships("deleted", query={"since": since})
