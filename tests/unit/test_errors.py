"""
Unit tests for error types.
"""

import json

import httpx

from mvault_client.errors import (
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
from mvault_client.models.activation import MembershipAlreadyActivated


class TestErrors:
    """Test cases for error types."""

    def test_mvault_error(self):
        """Test base MvaultError."""
        error = MvaultError("Test error", status_code=500, error_body={"detail": "x"})

        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.status_code == 500
        assert error.error_body == {"detail": "x"}

    def test_mvault_error_minimal(self):
        """Test MvaultError with minimal args."""
        error = MvaultError("Simple error")

        assert error.status_code is None
        assert error.error_body is None

    def test_bad_request_from_response_with_errors(self):
        """Test BadRequestError uses the body's errors field."""
        body = {"errors": {"email": ["Enter a valid email address."]}}
        response = httpx.Response(400, json=body)

        error = BadRequestError.from_response(response)

        assert error.status_code == 400
        assert error.errors == {"email": ["Enter a valid email address."]}
        assert json.loads(str(error)) == error.errors
        assert error.error_body == body

    def test_bad_request_from_response_without_errors(self):
        """Test BadRequestError falls back to the reason phrase."""
        response = httpx.Response(403, json={})

        error = BadRequestError.from_response(response)

        assert error.status_code == 403
        assert error.errors == {"__all__": "Forbidden"}
        assert error.general_messages() == ["Forbidden"]

    def test_bad_request_from_response_with_empty_errors(self):
        """Test an empty errors field is kept rather than replaced."""
        response = httpx.Response(400, json={"errors": {}})

        error = BadRequestError.from_response(response)

        assert error.errors == {}
        assert error.general_messages() == []

    def test_bad_request_from_non_json_response(self):
        """Test BadRequestError with a non-JSON body."""
        response = httpx.Response(401, text="<html>nope</html>")

        error = BadRequestError.from_response(response)

        assert error.errors == {"__all__": "Unauthorized"}
        assert error.error_body is None

    def test_general_messages(self):
        """Test general messages as an ordered list."""
        error = BadRequestError({"__all__": ["first", "second"], "uid": ["bad"]}, 409)

        assert error.general_messages() == ["first", "second"]

    def test_general_messages_missing(self):
        """Test general messages when only field errors exist."""
        error = BadRequestError({"uid": ["bad"]}, 400)

        assert error.general_messages() == []

    def test_activation_conflict_errors(self):
        """Test activation conflict error hierarchy and fields."""
        conflict = MembershipAlreadyActivated(
            membership_id="xyz",
            activating_account_uid="abc",
            raw_message="The membership xyz was already activated with UID abc",
        )
        error = MembershipActivatedError(conflict, membership_id="xyz", pbs_account_uid="abc")

        assert isinstance(error, ActivationConflictError)
        assert isinstance(error, BadRequestError)
        assert error.status_code == 409
        assert error.conflict is conflict
        assert error.membership_id == "xyz"
        assert error.pbs_account_uid == "abc"
        assert error.general_messages() == [conflict.raw_message]
        assert not isinstance(error, AnotherMembershipActivatedError)

    def test_membership_not_found_error(self):
        """Test MembershipNotFoundError carries the lookup."""
        error = MembershipNotFoundError("token", "abc123")

        assert error.lookup_type == "token"
        assert error.value == "abc123"
        assert error.status_code == 404
        assert json.loads(str(error)) == {"token": "abc123"}

    def test_error_inheritance(self):
        """Test error inheritance hierarchy."""
        for error in (
            UnexpectedResponseError("teapot", status_code=418),
            ConnectionError("down"),
            ConfigurationError("bad"),
            MembershipNotFoundError("id", "1"),
            BadRequestError({"__all__": "Bad Request"}, 400),
        ):
            assert isinstance(error, MvaultError)
