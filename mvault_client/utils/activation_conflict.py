"""Activation conflict parsing.

When an activation is rejected with a 409, the general ("__all__") messages
of the error are matched against the known Membership Vault message
templates. Templates are tried in order for each message and the first
match wins.
"""

import re
from typing import Callable, Optional, Sequence, Tuple, Union

from ..errors import (
    ActivationConflictError,
    AnotherMembershipActivatedError,
    BadRequestError,
    MembershipActivatedError,
)
from ..models.activation import (
    ActivationConflict,
    AnotherMembershipActivated,
    MembershipAlreadyActivated,
)

ACTIVATION_CONFLICT_STATUS = 409

ConflictBuilder = Callable[[re.Match[str]], ActivationConflict]

CONFLICT_TEMPLATES: Tuple[Tuple[re.Pattern[str], ConflictBuilder], ...] = (
    (
        re.compile(r"The UID (\S+) has already activated membership (\S+)"),
        lambda match: AnotherMembershipActivated(
            conflicting_account_uid=match.group(1),
            conflicting_membership_id=match.group(2),
            raw_message=match.string,
        ),
    ),
    (
        re.compile(r"The membership (\S+) was already activated with UID (\S+)"),
        lambda match: MembershipAlreadyActivated(
            membership_id=match.group(1),
            activating_account_uid=match.group(2),
            raw_message=match.string,
        ),
    ),
)


def parse_activation_conflict(
    messages: Union[str, Sequence[str], None],
) -> Optional[ActivationConflict]:
    """Classify activation conflict messages.

    Args:
        messages: General error messages (a single string or a sequence)

    Returns:
        The conflict descriptor for the first matching message, or None when
        no message matches a known template

    """
    if messages is None:
        return None
    if isinstance(messages, str):
        messages = [messages]

    for message in messages:
        for pattern, build in CONFLICT_TEMPLATES:
            match = pattern.search(str(message))
            if match:
                return build(match)
    return None


def conflict_error_for(
    conflict: ActivationConflict, cause: BadRequestError
) -> ActivationConflictError:
    """Build the typed error for a conflict found in a rejected activation."""
    if isinstance(conflict, AnotherMembershipActivated):
        return AnotherMembershipActivatedError(
            conflict,
            membership_id=conflict.conflicting_membership_id,
            pbs_account_uid=conflict.conflicting_account_uid,
            errors=cause.errors,
            status_code=cause.status_code or ACTIVATION_CONFLICT_STATUS,
            error_body=cause.error_body,
        )
    return MembershipActivatedError(
        conflict,
        membership_id=conflict.membership_id,
        pbs_account_uid=conflict.activating_account_uid,
        errors=cause.errors,
        status_code=cause.status_code or ACTIVATION_CONFLICT_STATUS,
        error_body=cause.error_body,
    )
