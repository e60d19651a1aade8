"""
Unit tests for query string utilities.
"""

from datetime import datetime, timedelta, timezone

import pytest

from mvault_client.errors import UnexpectedResponseError
from mvault_client.models.pagination import CollectionInfo, PageEnvelope
from mvault_client.utils.query import (
    DATETIME_FORMAT,
    build_query,
    datetimes_to_strings,
    format_datetime,
    get_next_page,
    not_empty_or_null,
)


def envelope_with_link(next_page_url):
    return PageEnvelope(
        objects=[],
        collection_info=CollectionInfo(
            total_items_count=10,
            items_per_page=5,
            current_page_number=1,
            next_page_url=next_page_url,
        ),
    )


class TestNotEmptyOrNull:
    """Test cases for not_empty_or_null."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("", False),
            (None, False),
            (0, True),
            ("0", True),
            (1, True),
            ("string", True),
            (False, True),
        ],
    )
    def test_not_empty_or_null(self, value, expected):
        assert not_empty_or_null(value) is expected


class TestFormatDatetime:
    """Test cases for datetime formatting."""

    def test_format_utc(self):
        value = datetime(2024, 1, 31, 18, 30, 5, tzinfo=timezone.utc)
        assert format_datetime(value) == "2024-01-31T18:30:05Z"

    def test_format_converts_to_utc(self):
        value = datetime(2024, 1, 31, 20, 30, tzinfo=timezone(timedelta(hours=2)))
        assert format_datetime(value) == "2024-01-31T18:30:00Z"

    def test_format_naive_as_local_time(self):
        value = datetime(2024, 6, 1, 12, 0, 0)
        expected = value.astimezone(timezone.utc).strftime(DATETIME_FORMAT)
        assert format_datetime(value) == expected

    def test_datetimes_to_strings(self):
        data = {"no": "datetime", "in": "this", "dict": "."}
        assert datetimes_to_strings(data) == data

        when = datetime(2020, 2, 29, tzinfo=timezone.utc)
        converted = datetimes_to_strings({**data, "dt": when})
        assert converted["dt"] == "2020-02-29T00:00:00Z"
        assert converted["no"] == "datetime"


class TestBuildQuery:
    """Test cases for build_query."""

    def test_drops_empty_and_none(self):
        query = build_query({"email": "", "since": None, "page": 2})
        assert query == "page=2"

    def test_keeps_zero_values(self):
        assert build_query({"a": 0, "b": "0"}) == "a=0&b=0"

    def test_encodes_values(self):
        assert build_query({"email": "member@example.org"}) == "email=member%40example.org"

    def test_formats_datetimes(self):
        since = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert build_query({"since": since}) == "since=2024-01-01T00%3A00%3A00Z"

    def test_empty(self):
        assert build_query(None) == ""
        assert build_query({}) == ""
        assert build_query({"email": None}) == ""


class TestGetNextPage:
    """Test cases for get_next_page."""

    def test_next_page(self):
        envelope = envelope_with_link("https://x.org/api/s/memberships/?page=3&since=now")
        assert get_next_page(envelope) == 3

    def test_no_link(self):
        assert get_next_page(envelope_with_link(None)) is None

    def test_no_collection_info(self):
        assert get_next_page(PageEnvelope.empty()) is None

    def test_link_without_page_parameter(self):
        envelope = envelope_with_link("https://x.org/api/s/memberships/?since=now")
        assert get_next_page(envelope) is None

    def test_link_with_invalid_page(self):
        envelope = envelope_with_link("https://x.org/api/s/memberships/?page=two")
        with pytest.raises(UnexpectedResponseError):
            get_next_page(envelope)
