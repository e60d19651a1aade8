"""Query string utilities for the MVault client SDK.

This module provides helpers for building API query strings, rendering
datetimes in the API's expected format, and reading next page links.
"""

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional
from urllib.parse import parse_qs, urlencode, urlparse

from ..errors import UnexpectedResponseError

if TYPE_CHECKING:
    from ..models.pagination import PageEnvelope

# https://docs.pbs.org/display/MV/Membership+Vault+API#MembershipVaultAPI-DateandTime
DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def not_empty_or_null(value: Any) -> bool:
    """Check if a query value should be sent.

    Only None and the empty string are dropped; 0 and "0" are kept.

    Args:
        value: Value to check

    Returns:
        True if value is not empty or None, False otherwise

    Examples:
        >>> not_empty_or_null("")
        False
        >>> not_empty_or_null(0)
        True

    """
    return value is not None and value != ""


def format_datetime(value: datetime) -> str:
    """Render a datetime in UTC using the API format.

    Naive datetimes are taken as local time.

    Args:
        value: Datetime to render

    Returns:
        String such as "2024-01-31T18:30:00Z"

    """
    return value.astimezone(timezone.utc).strftime(DATETIME_FORMAT)


def datetimes_to_strings(parameters: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy parameters with every datetime value rendered as an API string."""
    return {
        key: format_datetime(value) if isinstance(value, datetime) else value
        for key, value in parameters.items()
    }


def build_query(parameters: Optional[Mapping[str, Any]]) -> str:
    """Create a query string from a mapping of parameters.

    Empty/None values are ignored and datetimes are converted to the API
    format. Parameter order is preserved.

    Args:
        parameters: Query parameters keyed by name

    Returns:
        Encoded query string without the leading "?"

    Examples:
        >>> build_query({"email": "a@b.org", "since": None, "page": 0})
        'email=a%40b.org&page=0'

    """
    if not parameters:
        return ""
    filtered = {key: value for key, value in parameters.items() if not_empty_or_null(value)}
    return urlencode(datetimes_to_strings(filtered))


def get_next_page(envelope: "PageEnvelope") -> Optional[int]:
    """Read the next page number from a page's next page link.

    Args:
        envelope: A normalized API page

    Returns:
        Number of the next page, or None if there is no next page

    Raises:
        UnexpectedResponseError: If the link carries a non-numeric page

    """
    info = envelope.collection_info
    if info is None or not info.next_page_url:
        return None

    pages = parse_qs(urlparse(info.next_page_url).query).get("page")
    if not pages:
        return None

    try:
        return int(pages[0])
    except ValueError as e:
        raise UnexpectedResponseError(
            f"Invalid page in next page URL: {info.next_page_url}"
        ) from e
