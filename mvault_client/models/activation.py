"""
Activation conflict descriptors.

Produced when an activation is rejected with a 409 whose message matches one
of the known Membership Vault templates.
"""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class AnotherMembershipActivated(BaseModel):
    """The PBS Account already activated a different membership."""

    model_config = ConfigDict(frozen=True)

    conflicting_membership_id: str = Field(..., description="Membership already activated")
    conflicting_account_uid: str = Field(..., description="PBS Account UID that activated it")
    raw_message: str = Field(..., description="Message reported by the API")


class MembershipAlreadyActivated(BaseModel):
    """The membership was already activated by a different PBS Account."""

    model_config = ConfigDict(frozen=True)

    membership_id: str = Field(..., description="Membership being activated")
    activating_account_uid: str = Field(..., description="PBS Account UID holding it")
    raw_message: str = Field(..., description="Message reported by the API")


ActivationConflict = Union[AnotherMembershipActivated, MembershipAlreadyActivated]
