"""Internal HTTP client utility for Membership Vault communication.

This module provides the internal HTTP client implementation with basic
authentication and status classification. This class is not meant to be used
directly - use the public HttpClient class instead which adds debug logging
and the paged query helpers.
"""

from typing import Any, Dict, Literal, Mapping, Optional

import httpx

from ..errors import ConnectionError
from ..models.config import MvaultClientConfig
from .http_error_handler import classify_response
from .query import build_query, datetimes_to_strings

HttpMethod = Literal["GET", "PUT", "PATCH", "POST", "DELETE"]


def ensure_trailing_slash(endpoint: str) -> str:
    """Append a trailing slash to an endpoint path.

    The API drops PUT and PATCH payloads sent to paths without one.
    """
    return endpoint if endpoint.endswith("/") else endpoint + "/"


class InternalHttpClient:
    """Internal HTTP client for Membership Vault communication.

    Requests are sent with HTTP basic auth (API key and secret) against the
    station scoped base URL. HTTP errors are never raised by httpx; every
    response is classified by the status handler instead.
    """

    def __init__(
        self,
        config: MvaultClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize internal HTTP client with configuration.

        Args:
            config: MVault client configuration
            transport: Optional httpx transport (e.g. httpx.MockTransport)

        """
        self.config = config
        self.transport = transport
        self.client: Optional[httpx.AsyncClient] = None

    async def _initialize_client(self) -> httpx.AsyncClient:
        """Initialize HTTP client if not already initialized."""
        if self.client is None:
            self.client = httpx.AsyncClient(
                base_url=self.config.station_url,
                auth=httpx.BasicAuth(self.config.key, self.config.secret),
                timeout=self.config.timeout,
                headers={"Accept": "application/json"},
                transport=self.transport,
            )
        return self.client

    async def close(self):
        """Close the HTTP client."""
        if self.client:
            try:
                await self.client.aclose()
            except RuntimeError as e:
                # Only a closed event loop is tolerated during teardown
                if "Event loop is closed" not in str(e):
                    raise
            finally:
                self.client = None

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    def build_url(self, endpoint: str, query: Optional[Mapping[str, Any]] = None) -> str:
        """Build the relative request URL for an endpoint and query.

        Args:
            endpoint: API endpoint (e.g. "memberships/filter/active")
            query: Query parameters; empty/None values are dropped

        Returns:
            Relative URL with trailing slash and encoded query string

        """
        url = ensure_trailing_slash(endpoint)
        query_string = build_query(query)
        if query_string:
            url = f"{url}?{query_string}"
        return url

    async def request(
        self,
        method: HttpMethod,
        endpoint: str,
        query: Optional[Mapping[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """Send a request and classify the response.

        Args:
            method: HTTP method
            endpoint: API endpoint relative to the station URL
            query: Query parameters
            json: Request body (datetimes are converted to API strings)

        Returns:
            The HTTP response (success or "Not Found")

        Raises:
            BadRequestError: If the API rejects the request
            UnexpectedResponseError: If the API answers with an unhandled status
            ConnectionError: If the request fails at the transport level

        """
        client = await self._initialize_client()
        url = self.build_url(endpoint, query)
        body = datetimes_to_strings(json) if json is not None else None
        try:
            response = await client.request(method, url, json=body)
        except httpx.RequestError as e:
            raise ConnectionError(f"Request failed: {str(e)}") from e
        return classify_response(response)
