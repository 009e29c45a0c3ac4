"""
Unit tests for the Range / Content-Range codec.
"""

import pytest

from pyqradar.core.errors import MalformedHeader, ValidationError
from pyqradar.http.content_range import (
    PaginationWindow,
    format_content_range,
    format_range,
    parse_content_range,
)


class TestParseContentRange:
    """Test decoding of Content-Range values."""

    def test_resolved_window(self):
        """Test the standard items <min>-<max>/<total> form."""
        assert parse_content_range("items 0-9/40").as_tuple() == (0, 9, 40)

    def test_unresolved_window(self):
        """Test the items */<total> form."""
        assert parse_content_range("items */3") == PaginationWindow(0, 0, 3)

    def test_without_unit(self):
        """Test that the items token is optional."""
        assert parse_content_range("0-10/40").as_tuple() == (0, 10, 40)

    def test_surrounding_whitespace(self):
        """Test that whitespace around the value and the unit is ignored."""
        assert parse_content_range("  items   5-5/6 ").as_tuple() == (5, 5, 6)

    def test_empty_collection(self):
        """Test an unresolved window over an empty collection."""
        assert parse_content_range("items */0").as_tuple() == (0, 0, 0)

    @pytest.mark.parametrize(
        "header",
        [
            "items 0_9/40",
            "items 0-9_40",
            "items 0-9",
            "items 0-9/40/50",
            "items 9/40",
            "items 0-5-9/40",
            "items a-9/40",
            "items 0-9/abc",
            "items */abc",
            "items +1-9/40",
            "items 0-1_0/40",
            "items -1-9/40",
            "items 0-9/",
            "",
        ],
    )
    def test_malformed(self, header):
        """Test that malformed values raise MalformedHeader."""
        with pytest.raises(MalformedHeader):
            parse_content_range(header)

    def test_missing_slash_message(self):
        """Test the error raised when the total is missing."""
        with pytest.raises(MalformedHeader) as exc_info:
            parse_content_range("items 0-9")

        assert "slash" in str(exc_info.value)
        assert exc_info.value.header == "items 0-9"

    def test_missing_dash_message(self):
        """Test the error raised when the window has no dash."""
        with pytest.raises(MalformedHeader) as exc_info:
            parse_content_range("items 0_9/40")

        assert "dash" in str(exc_info.value)

    def test_min_greater_than_max(self):
        """Test that an inverted window is rejected."""
        with pytest.raises(MalformedHeader):
            parse_content_range("items 9-0/40")

    def test_max_greater_than_total(self):
        """Test that a window past the total is rejected."""
        with pytest.raises(MalformedHeader):
            parse_content_range("items 0-50/40")

    def test_non_string(self):
        """Test that a non-string value is rejected."""
        with pytest.raises(MalformedHeader):
            parse_content_range(None)


class TestFormatRange:
    """Test encoding of Range request values."""

    def test_format(self):
        """Test the items=<min>-<max> form uses an equals sign."""
        assert format_range(0, 49) == "items=0-49"

    def test_single_item(self):
        assert format_range(7, 7) == "items=7-7"

    @pytest.mark.parametrize("min_item,max_item", [(-1, 5), (5, 1), (True, 5), ("0", 5), (0, 1.5)])
    def test_invalid(self, min_item, max_item):
        """Test that invalid bounds raise ValidationError."""
        with pytest.raises(ValidationError):
            format_range(min_item, max_item)

    @pytest.mark.parametrize("window", [(0, 0, 1), (0, 9, 40), (10, 19, 20), (3, 3, 3)])
    def test_agrees_with_decoder(self, window):
        """Test that a requested window reads back from the matching Content-Range."""
        min_item, max_item, total = window
        assert format_range(min_item, max_item) == f"items={min_item}-{max_item}"
        header = format_content_range(PaginationWindow(*window))
        assert parse_content_range(header).as_tuple() == window


class TestFormatContentRange:
    """Test encoding of Content-Range response values."""

    def test_resolved(self):
        assert format_content_range(PaginationWindow(0, 9, 40)) == "items 0-9/40"

    def test_unresolved(self):
        """Test the */<total> form."""
        assert format_content_range(PaginationWindow(0, 0, 3), resolved=False) == "items */3"
