"""
SDK exceptions and error handling.

This module defines custom exceptions for the MVault client SDK. Errors raised
from API responses carry the HTTP status code and the decoded error body so
callers can inspect them and branch.
"""

import json
from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    import httpx

    from .models.activation import ActivationConflict


class MvaultError(Exception):
    """Base exception for MVault client SDK errors."""

    def __init__(
        self, message: str, status_code: int | None = None, error_body: Any | None = None
    ):
        """
        Initialize MVault error.

        Args:
            message: Error message
            status_code: HTTP status code if applicable
            error_body: Decoded error response body if applicable
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_body = error_body


class BadRequestError(MvaultError):
    """Raised when the API rejects a request (400, 401, 403 or 409).

    The API reports problems as a mapping of field names to messages, using
    the field name ``__all__`` for general (non-field) errors.
    """

    GENERAL_FIELD = "__all__"

    def __init__(
        self,
        errors: Dict[str, Any],
        status_code: int,
        error_body: Any | None = None,
    ):
        """
        Initialize bad request error.

        Args:
            errors: Field-keyed error messages
            status_code: HTTP status code of the response
            error_body: Full decoded response body
        """
        super().__init__(json.dumps(errors), status_code=status_code, error_body=error_body)
        self.errors = errors

    @classmethod
    def from_response(cls, response: "httpx.Response") -> "BadRequestError":
        """
        Build an error from an API response.

        Uses the body's ``errors`` field when present, otherwise a single
        ``__all__`` entry holding the HTTP reason phrase.

        Args:
            response: The rejected HTTP response

        Returns:
            BadRequestError with the response status as its code
        """
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and "errors" in body:
            errors = body["errors"]
            if not isinstance(errors, dict):
                errors = {cls.GENERAL_FIELD: errors}
        else:
            errors = {cls.GENERAL_FIELD: response.reason_phrase}

        return cls(errors, status_code=response.status_code, error_body=body)

    def general_messages(self) -> List[str]:
        """Get the general (``__all__``) messages as an ordered list."""
        messages = self.errors.get(self.GENERAL_FIELD)
        if messages is None:
            return []
        if isinstance(messages, str):
            return [messages]
        return [str(message) for message in messages]


class ActivationConflictError(BadRequestError):
    """Base error for conflicts preventing membership activation."""

    def __init__(
        self,
        conflict: "ActivationConflict",
        membership_id: str,
        pbs_account_uid: str,
        errors: Optional[Dict[str, Any]] = None,
        status_code: int = 409,
        error_body: Any | None = None,
    ):
        """
        Initialize activation conflict error.

        Args:
            conflict: Parsed conflict descriptor
            membership_id: Membership involved in the conflict
            pbs_account_uid: PBS Account UID involved in the conflict
            errors: Original field-keyed error messages
            status_code: HTTP status code (409)
            error_body: Full decoded response body
        """
        if errors is None:
            errors = {self.GENERAL_FIELD: [conflict.raw_message]}
        super().__init__(errors, status_code=status_code, error_body=error_body)
        self.conflict = conflict
        self.membership_id = membership_id
        self.pbs_account_uid = pbs_account_uid


class MembershipActivatedError(ActivationConflictError):
    """Raised when a membership has already been activated by another PBS Account."""

    pass


class AnotherMembershipActivatedError(ActivationConflictError):
    """Raised when a PBS Account has already activated another membership."""

    pass


class MembershipNotFoundError(MvaultError):
    """Raised when a membership is not known to the API."""

    def __init__(self, lookup_type: str, value: str):
        """
        Initialize membership not found error.

        Args:
            lookup_type: How the membership was looked up ("id" or "token")
            value: The value used for the lookup
        """
        super().__init__(json.dumps({lookup_type: value}), status_code=404)
        self.lookup_type = lookup_type
        self.value = value


class UnexpectedResponseError(MvaultError):
    """Raised when the API answers with a status or payload the client cannot handle."""

    pass


class ConnectionError(MvaultError):
    """Raised when the connection to the API fails."""

    pass


class ConfigurationError(MvaultError):
    """Raised when configuration is invalid."""

    pass
