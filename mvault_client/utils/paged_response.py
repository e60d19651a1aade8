"""Page-traversable list responses from the Membership Vault API.

PagedResponse is a cursor over the pages of one list query. It fetches one
page at construction (to learn the item and page totals) and afterwards only
when the logical current page differs from the page last fetched.

Instances are not safe for concurrent use: a cursor holds a single mutable
current page and must be driven by one traversal at a time.
"""

import math
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from ..api.response_utils import decode_body, normalize_page
from ..models.pagination import PageEnvelope
from .http_error_handler import NOT_FOUND_STATUS
from .query import get_next_page

if TYPE_CHECKING:
    from .http_client import HttpClient


class PagedResponse:
    """Cursor over the pages of a Membership Vault list query."""

    def __init__(
        self,
        http_client: "HttpClient",
        endpoint: str,
        query: Optional[Mapping[str, Any]] = None,
        page: int = 1,
    ):
        """Initialize the cursor without fetching.

        Use PagedResponse.create() to get a cursor with count data loaded.

        Args:
            http_client: Client used for requests
            endpoint: Endpoint to query
            query: Additional API query parameters
            page: Starting page. This is also the page the cursor restarts
                from, so "first" is not necessarily page 1.

        """
        self._http_client = http_client
        self._endpoint = endpoint
        self._query: Dict[str, Any] = dict(query or {})
        self._first = page
        self._page: Optional[int] = page
        self._response: Optional[PageEnvelope] = None
        self._response_page: Optional[int] = None
        self._total_items_count = 0
        self._page_count = 0

    @classmethod
    async def create(
        cls,
        http_client: "HttpClient",
        endpoint: str,
        query: Optional[Mapping[str, Any]] = None,
        page: int = 1,
    ) -> "PagedResponse":
        """Create a cursor and execute the initial query to load count data.

        Raises:
            BadRequestError: If the API rejects the query

        """
        paged_response = cls(http_client, endpoint, query, page)
        await paged_response._load()
        return paged_response

    @property
    def endpoint(self) -> str:
        """Endpoint being queried."""
        return self._endpoint

    @property
    def page(self) -> Optional[int]:
        """Logical current page, None once the last page has been passed."""
        return self._page

    @property
    def first_page(self) -> int:
        """Page the cursor restarts from."""
        return self._first

    async def _load(self) -> None:
        """Fetch the logical current page and record it as the last response."""
        assert self._page is not None
        page = self._page
        envelope = await self._execute(page)
        info = envelope.collection_info
        self._response = envelope
        self._response_page = info.current_page_number if info is not None else page

    async def _execute(self, page: int) -> PageEnvelope:
        """Execute an API query and update count data.

        Args:
            page: Page to fetch

        Returns:
            The normalized page

        """
        query = dict(self._query)
        if page > 1:
            query["page"] = page

        response = await self._http_client.request("GET", self._endpoint, query=query)

        # "Not Found" or an empty body on a list endpoint means no matching records.
        data = None if response.status_code == NOT_FOUND_STATUS else decode_body(response)
        envelope = PageEnvelope.empty() if data is None else normalize_page(data)

        info = envelope.collection_info
        if info is not None:
            self._total_items_count = info.total_items_count
            if info.total_items_count and info.items_per_page:
                self._page_count = math.ceil(info.total_items_count / info.items_per_page)
            else:
                self._page_count = 0
        else:
            self._total_items_count = 0
            self._page_count = 0

        return envelope

    async def current(self) -> PageEnvelope:
        """Get the page for the logical current page.

        The API is only queried when the last fetched page is not the logical
        current page.

        Raises:
            IndexError: If the cursor has moved past the last page

        """
        if self._page is None:
            raise IndexError("No current page: the cursor is past the last page")
        if self._response is None or self._response_page != self._page:
            await self._load()
        assert self._response is not None
        return self._response

    def advance(self) -> None:
        """Move to the page linked from the last fetched page (None if none)."""
        if self._response is None:
            self._page = None
            return
        self._page = get_next_page(self._response)

    def restart(self) -> None:
        """Move back to the first page."""
        self._page = self._first

    def is_valid(self) -> bool:
        """Check that a current page is set and the result set is not empty."""
        return self._page is not None and self._total_items_count > 0

    def page_count(self) -> int:
        """Get the number of pages in the result set."""
        return self._page_count

    def total_count(self) -> int:
        """Get the number of records (not pages) in the result set."""
        return self._total_items_count

    def __len__(self) -> int:
        """Get the number of pages in the result set."""
        return self._page_count
