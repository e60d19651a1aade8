"""
Pagination types for the MVault client SDK.

This module contains Pydantic models for the paged list responses of the
Membership Vault API. Every list response is normalized into a PageEnvelope.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CollectionInfo(BaseModel):
    """
    Pagination metadata for list responses.

    Fields:
        total_items_count: Total number of items across all pages
        items_per_page: Number of items per page
        current_page_number: Page number of this response (1-based)
        next_page_url: Link to the next page, absent on the last page
    """

    model_config = ConfigDict(extra="allow")

    total_items_count: int = Field(..., description="Total number of items")
    items_per_page: int = Field(..., description="Number of items per page")
    current_page_number: int = Field(..., description="Current page number (1-based)")
    next_page_url: Optional[str] = Field(default=None, description="Next page link")


class PageEnvelope(BaseModel):
    """
    One page of a list response.

    Fields:
        objects: Records on this page, in API order
        collection_info: Pagination metadata, None for "no matches" pages
    """

    model_config = ConfigDict(extra="allow")

    objects: List[Any] = Field(default_factory=list, description="Records on this page")
    collection_info: Optional[CollectionInfo] = Field(
        default=None, description="Pagination metadata"
    )

    @classmethod
    def empty(cls) -> "PageEnvelope":
        """Build the envelope used for a list query without any match."""
        return cls(objects=[])
