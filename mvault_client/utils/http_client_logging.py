"""
HTTP client logging utilities for debug request tracing.

This module provides logging functionality extracted from HttpClient to keep
the main HTTP client class focused. All sensitive data is masked using
DataMasker before logging.
"""

import logging
import time
from typing import Any, Dict, Mapping, Optional

from .data_masker import DataMasker

logger = logging.getLogger(__name__)


def calculate_duration_ms(start_time: float) -> int:
    """
    Calculate request duration.

    Args:
        start_time: Request start time from time.perf_counter()

    Returns:
        Duration in milliseconds
    """
    return int((time.perf_counter() - start_time) * 1000)


def log_http_request_debug(
    method: str,
    endpoint: str,
    status_code: Optional[int],
    start_time: float,
    query: Optional[Mapping[str, Any]] = None,
    request_data: Optional[Dict[str, Any]] = None,
    error: Optional[Exception] = None,
) -> None:
    """
    Log debug details of an HTTP request.

    Args:
        method: HTTP method
        endpoint: API endpoint
        status_code: Response status code, None if no response was received
        start_time: Request start time from time.perf_counter()
        query: Query parameters
        request_data: Request body data
        error: Exception raised for the request, if any
    """
    duration_ms = calculate_duration_ms(start_time)
    masked_endpoint = DataMasker.mask_path(endpoint)
    masked_query = DataMasker.mask_sensitive_data(dict(query)) if query else None
    masked_body = DataMasker.mask_sensitive_data(request_data) if request_data else None

    if error is not None:
        logger.debug(
            "%s %s failed after %dms (%s: %s)",
            method,
            masked_endpoint,
            duration_ms,
            type(error).__name__,
            error,
        )
        return

    logger.debug(
        "%s %s -> %s in %dms (query=%s, body=%s)",
        method,
        masked_endpoint,
        status_code,
        duration_ms,
        masked_query,
        masked_body,
    )
