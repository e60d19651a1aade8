"""Utility modules for the MVault client SDK."""

from .activation_conflict import parse_activation_conflict
from .config_loader import load_config
from .data_masker import DataMasker
from .http_client import HttpClient
from .paged_response import PagedResponse
from .query import build_query, format_datetime, get_next_page
from .results import Results

__all__ = [
    "HttpClient",
    "PagedResponse",
    "Results",
    "load_config",
    "DataMasker",
    "build_query",
    "format_datetime",
    "get_next_page",
    "parse_activation_conflict",
]
