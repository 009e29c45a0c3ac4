"""
Shared fixtures for the pyqradar unit tests.

The dispatcher runs on a real ``requests.Session`` whose ``send`` is patched,
so URL composition, query encoding and header merging are exercised exactly
as they go on the wire; only the network round trip is faked.
"""

import io
import json

import pytest
from unittest.mock import patch
import requests
from requests.structures import CaseInsensitiveDict

from pyqradar.http.qradar_http import QRadarHttpClient


BASE_URL = "https://example.com"
TOKEN = "test-sec-token"
VERSION = "12.0"


def build_response(status_code=200, body=None, headers=None):
    """
    Build an unread ``requests.Response`` backed by an in-memory body.

    ``body`` may be bytes, a str, or any JSON-serialisable value.
    """
    if body is None:
        content = b""
    elif isinstance(body, bytes):
        content = body
    elif isinstance(body, str):
        content = body.encode("utf-8")
    else:
        content = json.dumps(body).encode("utf-8")

    response = requests.Response()
    response.status_code = status_code
    response.raw = io.BytesIO(content)
    response.headers = CaseInsensitiveDict(headers or {})
    response.encoding = "utf-8"
    return response


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def http_client():
    client = QRadarHttpClient(base_url=BASE_URL, token=TOKEN, version=VERSION)
    yield client
    client.close()


@pytest.fixture
def mock_send(http_client):
    """Patch the session transport; defaults to an empty 200 response."""
    with patch.object(http_client.session, "send") as send:
        send.return_value = build_response(200)
        yield send


@pytest.fixture
def sent(mock_send):
    """Return the ``PreparedRequest`` handed to the transport (last call by default)."""

    def _sent(index=-1):
        return mock_send.call_args_list[index][0][0]

    return _sent
