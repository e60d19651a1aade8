"""HTTP error handler utilities for InternalHttpClient.

This module maps Membership Vault HTTP responses onto the SDK error types.

https://docs.pbs.org/display/MV/Membership+Vault+API#MembershipVaultAPI-HTTPResponseStatusCodes
"""

from typing import Any, Optional

import httpx

from ..errors import BadRequestError, UnexpectedResponseError

SUCCESS_STATUSES = frozenset({200, 204})
BAD_REQUEST_STATUSES = frozenset({400, 401, 403, 409})
NOT_FOUND_STATUS = 404


def parse_error_body(response: httpx.Response) -> Optional[Any]:
    """Decode a response body as JSON.

    Args:
        response: HTTP response object

    Returns:
        Decoded JSON value, or None when the body is empty or not JSON

    """
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def classify_response(response: httpx.Response) -> httpx.Response:
    """Check a response status and raise the matching SDK error.

    "Not Found" is passed through to the caller: a missing single record and
    an empty list query are handled differently by callers.

    Args:
        response: HTTP response object

    Returns:
        The response, for success and "Not Found" statuses

    Raises:
        BadRequestError: For 400, 401, 403 and 409 responses
        UnexpectedResponseError: For any other status

    """
    status_code = response.status_code
    if status_code in SUCCESS_STATUSES or status_code == NOT_FOUND_STATUS:
        return response
    if status_code in BAD_REQUEST_STATUSES:
        raise BadRequestError.from_response(response)
    raise UnexpectedResponseError(
        response.reason_phrase,
        status_code=status_code,
        error_body=parse_error_body(response),
    )
