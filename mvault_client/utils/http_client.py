"""
Public HTTP client utility for Membership Vault communication.

This module provides the public HTTP client interface that wraps
InternalHttpClient and adds debug logging for all requests plus helpers for
single object and paged list queries. Sensitive data is masked using
DataMasker before logging.
"""

import time
from typing import Any, Dict, List, Mapping, Optional

import httpx

from ..api.response_utils import decode_body
from ..models.config import MvaultClientConfig
from .http_client_logging import log_http_request_debug
from .http_error_handler import NOT_FOUND_STATUS
from .internal_http_client import HttpMethod, InternalHttpClient
from .paged_response import PagedResponse
from .results import Results


class HttpClient:
    """
    Public HTTP client for Membership Vault communication.

    This class wraps InternalHttpClient and adds:
    - Debug logging when log_level is 'debug'
    - Single object lookups (get_one)
    - Lazy paged list queries (get) and full list materialization (get_all)
    """

    def __init__(
        self,
        config: MvaultClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize public HTTP client with configuration.

        Args:
            config: MVault client configuration
            transport: Optional httpx transport (e.g. httpx.MockTransport)
        """
        self.config = config
        self._internal_client = InternalHttpClient(config, transport=transport)

    async def close(self):
        """Close the HTTP client."""
        await self._internal_client.close()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def request(
        self,
        method: HttpMethod,
        endpoint: str,
        query: Optional[Mapping[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """
        Send a request to the API.

        Args:
            method: HTTP method
            endpoint: API endpoint relative to the station URL
            query: Query parameters (empty/None values are dropped)
            json: Request body

        Returns:
            The HTTP response (success or "Not Found")

        Raises:
            BadRequestError: If the API rejects the request
            UnexpectedResponseError: If the API answers with an unhandled status
            ConnectionError: If the request fails at the transport level
        """
        start_time = time.perf_counter()
        try:
            response = await self._internal_client.request(method, endpoint, query=query, json=json)
        except Exception as error:
            if self.config.log_level == "debug":
                log_http_request_debug(
                    method,
                    endpoint,
                    getattr(error, "status_code", None),
                    start_time,
                    query=query,
                    request_data=json,
                    error=error,
                )
            raise

        if self.config.log_level == "debug":
            log_http_request_debug(
                method,
                endpoint,
                response.status_code,
                start_time,
                query=query,
                request_data=json,
            )
        return response

    async def get_one(
        self, endpoint: str, query: Optional[Mapping[str, Any]] = None
    ) -> Optional[Any]:
        """
        Get a single object from the API.

        Args:
            endpoint: Endpoint to query
            query: Additional query parameters

        Returns:
            Decoded JSON object, or None if nothing was found
        """
        response = await self.request("GET", endpoint, query=query)
        if response.status_code == NOT_FOUND_STATUS:
            return None
        return decode_body(response) or None

    async def get(self, endpoint: str, query: Optional[Mapping[str, Any]] = None) -> Results:
        """
        Get a lazy record sequence for a list endpoint.

        The first page is fetched immediately to load count data.

        Args:
            endpoint: Endpoint to query
            query: Additional query parameters

        Returns:
            Results over every page of the query
        """
        paged_response = await PagedResponse.create(self, endpoint, query)
        return Results(paged_response)

    async def get_all(
        self, endpoint: str, query: Optional[Mapping[str, Any]] = None
    ) -> List[Any]:
        """
        Get a complete list of records by paging through all results.

        Args:
            endpoint: Endpoint to query
            query: Additional query parameters

        Returns:
            All records returned by the API
        """
        results = await self.get(endpoint, query)
        return await results.to_list()
