"""
Unit tests for the asset model wrappers.
"""

import json

import pytest

from pyqradar.api.asset_model import AssetModelEndpoint
from pyqradar.core.errors import APIError


@pytest.fixture
def asset_model(http_client):
    return AssetModelEndpoint(http_client)


class TestAssets:
    """Test assets and asset properties."""

    def test_list_assets(self, asset_model, mock_send, sent, make_response):
        mock_send.return_value = make_response(200, [{"id": 1001}], {"Content-Range": "items 0-0/300"})

        page = asset_model.list_assets(None, filter="id=1001", min_item=0, max_item=0)

        assert page.total == 300
        assert sent().url == "https://example.com/api/asset_model/assets?filter=id%3D1001"

    def test_update_asset_accepted(self, asset_model, mock_send, sent, make_response):
        """Test that the asynchronous 202 answer is a success."""
        mock_send.return_value = make_response(202)

        assert asset_model.update_asset(None, 1001, {"properties": [{"type_id": 1, "value": "db01"}]}) is None

        request = sent()
        assert request.method == "POST"
        assert request.url == "https://example.com/api/asset_model/assets/1001"
        assert json.loads(request.body)["properties"][0]["value"] == "db01"

    def test_list_properties(self, asset_model, mock_send, sent, make_response):
        mock_send.return_value = make_response(200, [{"id": 1, "name": "Given Name"}])

        asset_model.list_properties(None)

        assert sent().url == "https://example.com/api/asset_model/properties"


class TestSavedSearches:
    """Test asset saved searches and their groups."""

    def test_saved_search_groups(self, asset_model, mock_send, sent, make_response):
        mock_send.side_effect = [
            make_response(200, [{"id": 4}]),
            make_response(200, {"id": 4, "name": "Servers"}),
            make_response(200, {"id": 4, "name": "Core servers"}),
            make_response(204),
        ]

        asset_model.list_saved_search_groups(None)
        asset_model.get_saved_search_group(None, 4)
        asset_model.update_saved_search_group(None, 4, {"name": "Core servers"})
        asset_model.delete_saved_search_group(None, 4)

        base = "https://example.com/api/asset_model/saved_search_groups"
        assert [(sent(i).method, sent(i).url) for i in range(4)] == [
            ("GET", base),
            ("GET", f"{base}/4"),
            ("POST", f"{base}/4"),
            ("DELETE", f"{base}/4"),
        ]

    def test_saved_searches(self, asset_model, mock_send, sent, make_response):
        mock_send.side_effect = [
            make_response(200, [{"id": 8}]),
            make_response(200, {"id": 8}),
            make_response(200, {"id": 8, "name": "Linux hosts"}),
            make_response(200, [{"id": 1001}], {"Content-Range": "items 0-0/1"}),
            make_response(204),
        ]

        asset_model.list_saved_searches(None)
        asset_model.get_saved_search(None, 8)
        asset_model.update_saved_search(None, 8, {"name": "Linux hosts"})
        results = asset_model.list_saved_search_results(None, 8, min_item=0, max_item=0)
        asset_model.delete_saved_search(None, 8)

        assert results.items == [{"id": 1001}]
        assert sent(3).url == "https://example.com/api/asset_model/saved_searches/8/results"
        assert sent(3).headers["Range"] == "items=0-0"
        assert sent(4).method == "DELETE"

    def test_delete_saved_search_failure(self, asset_model, mock_send, make_response):
        mock_send.return_value = make_response(404, {"message": "saved search not found"})

        with pytest.raises(APIError):
            asset_model.delete_saved_search(None, 8)
