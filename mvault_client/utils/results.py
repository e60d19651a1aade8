"""Record sequence over the pages of a Membership Vault list query."""

from typing import Any, AsyncIterator, List, Tuple

from .paged_response import PagedResponse

MEMBERSHIP_ID_FIELD = "membership_id"


class Results:
    """Lazy, restartable sequence of the records of a list query.

    Every ``async for`` over an instance starts again from the cursor's first
    page; pages are fetched on demand. Not safe for concurrent traversals.
    """

    def __init__(self, paged_response: PagedResponse):
        """Initialize results.

        Args:
            paged_response: Cursor owned by this sequence

        """
        self._paged_response = paged_response

    @property
    def response(self) -> PagedResponse:
        """The cursor being iterated."""
        return self._paged_response

    def __aiter__(self) -> AsyncIterator[Any]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[Any]:
        cursor = self._paged_response
        cursor.restart()
        while cursor.is_valid():
            envelope = await cursor.current()
            for record in envelope.objects:
                yield record
            cursor.advance()

    async def items(self) -> AsyncIterator[Tuple[Any, Any]]:
        """Iterate (membership_id, record) pairs."""
        async for record in self:
            membership_id = record.get(MEMBERSHIP_ID_FIELD) if isinstance(record, dict) else None
            yield membership_id, record

    async def to_list(self) -> List[Any]:
        """Fetch every page and return all records."""
        return [record async for record in self]

    def count(self) -> int:
        """Get the total number of records reported by the API."""
        return self._paged_response.total_count()

    def __len__(self) -> int:
        return self.count()
