"""
API response utilities for normalizing Membership Vault list responses.

The API returns list data in two shapes:
- Paged: {"objects": [...], "collection_info": {...}}
- Flat: [...] (a bare array on a single page, e.g. the "uid" filter)

This module normalizes both into a PageEnvelope once, at fetch time.
"""

from typing import Any

import httpx
from pydantic import ValidationError

from ..errors import UnexpectedResponseError
from ..models.pagination import CollectionInfo, PageEnvelope


def normalize_page(data: Any) -> PageEnvelope:
    """
    Normalize a decoded list response into a PageEnvelope.

    A flat array becomes a single page holding every record, with
    items_per_page and total_items_count equal to the array length and no
    next page link.

    Args:
        data: Decoded JSON body of a list response

    Returns:
        Normalized page envelope

    Raises:
        UnexpectedResponseError: If the body is neither an array nor a page object
    """
    if isinstance(data, list):
        return PageEnvelope(
            objects=data,
            collection_info=CollectionInfo(
                total_items_count=len(data),
                items_per_page=len(data),
                current_page_number=1,
            ),
        )

    if isinstance(data, dict):
        try:
            return PageEnvelope.model_validate(data)
        except ValidationError as e:
            raise UnexpectedResponseError(f"Malformed page response: {e}") from e

    raise UnexpectedResponseError(f"Unexpected page response type: {type(data).__name__}")


def decode_body(response: httpx.Response) -> Any:
    """
    Decode a successful response body.

    Args:
        response: HTTP response with a success status

    Returns:
        Decoded JSON, or None for an empty body (e.g. 204 No Content)

    Raises:
        UnexpectedResponseError: If the body is not valid JSON
    """
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as e:
        raise UnexpectedResponseError(
            f"Response body is not valid JSON: {e}", status_code=response.status_code
        ) from e
