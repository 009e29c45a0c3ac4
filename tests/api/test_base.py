"""
Unit tests for the shared endpoint plumbing.

Tests status checking, JSON decoding, pagination windows and uploads through
a minimal Endpoint subclass.
"""

import pytest
from unittest.mock import patch

from pyqradar.api.base import (
    ACCEPTED,
    Endpoint,
    PaginatedResponse,
    path_segment,
    query_options,
    range_options,
)
from pyqradar.core.errors import APIError, IntegrationError, MalformedHeader, ValidationError
from pyqradar.http.options import apply_options


@pytest.fixture
def endpoint(http_client):
    return Endpoint(http_client)


class TestHelpers:
    """Test option and path helpers."""

    def test_path_segment_quotes_everything(self):
        assert path_segment(42) == "42"
        assert path_segment("my set/1") == "my%20set%2F1"

    def test_query_options_skip_empty(self):
        options = apply_options(*query_options(fields="id", filter="", sort="-id"))
        assert options.params == [("fields", "id"), ("sort", "-id")]

    def test_range_requires_both_bounds(self):
        assert range_options(None, None) == []
        assert range_options(0, None) == []
        assert range_options(None, 9) == []

        options = apply_options(*range_options(0, 9))
        assert options.get_headers("Range") == ["items=0-9"]

    def test_range_validated(self):
        with pytest.raises(ValidationError):
            range_options(9, 0)


class TestPaginatedResponse:
    """Test the page DTO."""

    def test_window_and_dict(self):
        page = PaginatedResponse(total=40, min=0, max=1, items=[{"id": 1}, {"id": 2}])

        assert page.window.as_tuple() == (0, 1, 40)
        assert page.to_dict() == {"total": 40, "min": 0, "max": 1, "items": [{"id": 1}, {"id": 2}]}
        assert PaginatedResponse.from_dict(page.to_dict()) == page

    def test_from_dict_ignores_unknown_keys(self):
        page = PaginatedResponse.from_dict({"total": 1, "min": 0, "max": 0, "items": [], "next": "x"})
        assert page.total == 1


class TestList:
    """Test list decoding."""

    def test_content_range(self, endpoint, mock_send, sent, make_response):
        mock_send.return_value = make_response(200, [{"id": 1}, {"id": 2}], {"Content-Range": "items 0-1/40"})

        page = endpoint._list(None, "siem/offenses", fields="id", min_item=0, max_item=1)

        assert page == PaginatedResponse(total=40, min=0, max=1, items=[{"id": 1}, {"id": 2}])
        request = sent()
        assert request.url == "https://example.com/api/siem/offenses?fields=id"
        assert request.headers["Range"] == "items=0-1"

    def test_unresolved_content_range(self, endpoint, mock_send, make_response):
        mock_send.return_value = make_response(200, [], {"Content-Range": "items */0"})

        page = endpoint._list(None, "siem/offenses")

        assert (page.total, page.min, page.max, page.items) == (0, 0, 0, [])

    def test_missing_content_range(self, endpoint, mock_send, sent, make_response):
        """Test that without Content-Range the page is the whole collection."""
        mock_send.return_value = make_response(200, [{"id": 1}, {"id": 2}, {"id": 3}])

        page = endpoint._list(None, "disaster_recovery/ariel_copy_profiles")

        assert page.window.as_tuple() == (0, 2, 3)
        assert "Range" not in sent().headers

    def test_empty_body(self, endpoint, mock_send, make_response):
        mock_send.return_value = make_response(200)

        page = endpoint._list(None, "siem/offenses")

        assert page.items == []
        assert page.total == 0

    def test_malformed_content_range(self, endpoint, mock_send, make_response):
        response = make_response(200, [], {"Content-Range": "items 0_9/40"})
        mock_send.return_value = response

        with patch.object(response, "close", wraps=response.close) as mock_close:
            with pytest.raises(MalformedHeader):
                endpoint._list(None, "siem/offenses")

        mock_close.assert_called_once()

    def test_not_a_list(self, endpoint, mock_send, make_response):
        mock_send.return_value = make_response(200, {"id": 1})

        with pytest.raises(IntegrationError):
            endpoint._list(None, "siem/offenses")

    def test_error_status(self, endpoint, mock_send, make_response):
        """Test that an unexpected status raises APIError with the body."""
        response = make_response(403, '{"message": "You do not have the required capabilities"}')
        mock_send.return_value = response

        with patch.object(response, "close", wraps=response.close) as mock_close:
            with pytest.raises(APIError) as exc_info:
                endpoint._list(None, "siem/offenses")

        assert exc_info.value.status_code == 403
        assert "required capabilities" in exc_info.value.body
        mock_close.assert_called_once()


class TestCalls:
    """Test get/send/delete/upload helpers."""

    def test_get(self, endpoint, mock_send, sent, make_response):
        mock_send.return_value = make_response(200, {"id": 7})

        assert endpoint._get(None, "siem/offenses/7", fields="id") == {"id": 7}
        assert sent().url == "https://example.com/api/siem/offenses/7?fields=id"

    def test_invalid_json(self, endpoint, mock_send, make_response):
        mock_send.return_value = make_response(200, b"<html>not json</html>")

        with pytest.raises(IntegrationError):
            endpoint._get(None, "siem/offenses/7")

    def test_send_without_body(self, endpoint, mock_send, sent, make_response):
        mock_send.return_value = make_response(201, {"id": 1})

        assert endpoint._send(None, "POST", "ariel/searches") == {"id": 1}
        request = sent()
        assert request.body is None
        assert "Content-Type" not in request.headers

    def test_send_with_body(self, endpoint, mock_send, sent, make_response):
        mock_send.return_value = make_response(200, {"id": 1})

        endpoint._send(None, "POST", "config/deployment/hosts/1", {"eps_allocation": 5})

        assert sent().body == b'{"eps_allocation": 5}'

    def test_send_null_body_is_sent(self, endpoint, mock_send, sent, make_response):
        """Test that None is a JSON body, not the absence of one."""
        mock_send.return_value = make_response(201)

        endpoint._send(None, "POST", "some/endpoint", None)

        assert sent().body == b"null"

    def test_delete_no_content(self, endpoint, mock_send, make_response):
        mock_send.return_value = make_response(204)

        assert endpoint._delete(None, "dynamic_search/searches/h") is None

    def test_delete_unexpected_status(self, endpoint, mock_send, make_response):
        mock_send.return_value = make_response(202, {"status": "QUEUED"})

        with pytest.raises(APIError) as exc_info:
            endpoint._delete(None, "dynamic_search/searches/h")

        assert exc_info.value.status_code == 202

    def test_delete_accepted(self, endpoint, mock_send, make_response):
        mock_send.return_value = make_response(202, {"status": "QUEUED"})

        assert endpoint._delete(None, "ariel/searches/s", expected=ACCEPTED) == {"status": "QUEUED"}

    def test_upload(self, endpoint, mock_send, sent, make_response, tmp_path):
        archive = tmp_path / "app.zip"
        archive.write_bytes(b"PK\x03\x04zip")
        mock_send.return_value = make_response(201, {"application_id": 3})

        result = endpoint._upload(None, "POST", "gui_app_framework/application_definitions", str(archive))

        assert result == {"application_id": 3}
        request = sent()
        assert request.body == b"PK\x03\x04zip"
        assert request.headers["Content-Type"] == "application/zip"

    def test_upload_missing_file(self, endpoint, mock_send, tmp_path):
        with pytest.raises(IntegrationError):
            endpoint._upload(None, "POST", "gui_app_framework/application_definitions", str(tmp_path / "nope.zip"))

        mock_send.assert_not_called()
