"""
Shared pytest fixtures for MVault client tests.
"""

from typing import Any, List, Optional

import httpx
import pytest

from mvault_client import MvaultClient, MvaultClientConfig
from mvault_client.utils.http_client import HttpClient

BASE_URL = "https://mvault.services.pbs.org/api/station_id/"


def membership(membership_id: str, **fields: Any) -> dict:
    """Build a membership record as returned by the API."""
    record = {
        "membership_id": membership_id,
        "first_name": "First",
        "last_name": "Last",
        "offer": "basic",
        "status": "On",
    }
    record.update(fields)
    return record


MEMBERSHIPS_PAGE_1 = {
    "objects": [membership("m-1"), membership("m-2")],
    "collection_info": {
        "total_items_count": 4,
        "items_per_page": 2,
        "current_page_number": 1,
        "next_page_url": BASE_URL + "memberships/?page=2",
    },
}

MEMBERSHIPS_PAGE_2 = {
    "objects": [membership("m-3"), membership("m-4")],
    "collection_info": {
        "total_items_count": 4,
        "items_per_page": 2,
        "current_page_number": 2,
        "previous_page_url": BASE_URL + "memberships/",
    },
}

MEMBERSHIPS_ARRAY = [membership("m-uid", pbs_profile={"UID": "uid"})]


def json_response(status_code: int, body: Any = None) -> httpx.Response:
    """API response with a JSON body (an empty array by default)."""
    return httpx.Response(status_code, json=[] if body is None else body)


class MockHandler:
    """Queue of canned responses served in order by an httpx.MockTransport."""

    def __init__(self):
        self.responses: List[Any] = []
        self.requests: List[httpx.Request] = []

    def append(self, *responses: Any) -> None:
        self.responses.extend(responses)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last_request(self) -> Optional[httpx.Request]:
        return self.requests[-1] if self.requests else None


@pytest.fixture
def config():
    """Test configuration."""
    return MvaultClientConfig(
        key="api_key",
        secret="secret",
        station_id="station_id",
    )


@pytest.fixture
def mock_handler():
    """Queued response handler."""
    return MockHandler()


@pytest.fixture
def transport(mock_handler):
    """httpx transport serving the queued responses."""
    return httpx.MockTransport(mock_handler)


@pytest.fixture
def http_client(config, transport):
    """HTTP client fixture backed by the mock transport."""
    return HttpClient(config, transport=transport)


@pytest.fixture
def client(config, transport):
    """Test MvaultClient instance backed by the mock transport."""
    return MvaultClient(config, transport=transport)
