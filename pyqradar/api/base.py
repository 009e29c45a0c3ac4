"""
Shared plumbing for the QRadar endpoint wrappers.

Each resource group (``SIEMEndpoint``, ``ConfigEndpoint``, ...) subclasses
``Endpoint`` and turns one REST operation into one method: build options,
dispatch through ``QRadarHttpClient``, check the status code, decode JSON,
and for list operations decode ``Content-Range`` into a ``PaginatedResponse``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Sequence
from urllib.parse import quote

import requests

from ..core.dto import BaseDTO
from ..core.errors import APIError, IntegrationError
from ..core.logging import get_logger
from ..http.content_range import PaginationWindow, format_range, parse_content_range
from ..http.context import CallContext
from ..http.options import Option, with_header, with_param
from ..http.qradar_http import QRadarHttpClient


logger = get_logger("pyqradar.api")


RANGE_HEADER = "Range"
CONTENT_RANGE_HEADER = "Content-Range"

OK = (200,)
CREATED = (200, 201)
ACCEPTED = (202,)
NO_CONTENT = (204,)

_NO_BODY = object()


@dataclass
class PaginatedResponse(BaseDTO):
    """
    One page of a list operation plus the window QRadar reported for it.
    """

    total: int
    min: int
    max: int
    items: List[Any] = field(default_factory=list)

    @property
    def window(self) -> PaginationWindow:
        return PaginationWindow(self.min, self.max, self.total)


def path_segment(value: Any) -> str:
    """Quote an identifier for use as a single URL path segment."""
    return quote(str(value), safe="")


def query_options(fields: str = "", filter: str = "", sort: str = "") -> List[Option]:
    """
    The ``fields``/``filter``/``sort`` query parameters, skipping empty ones.
    """
    options: List[Option] = []
    if fields:
        options.append(with_param("fields", fields))
    if filter:
        options.append(with_param("filter", filter))
    if sort:
        options.append(with_param("sort", sort))
    return options


def range_options(min_item: Optional[int], max_item: Optional[int]) -> List[Option]:
    """
    A ``Range: items=<min>-<max>`` header when both bounds are given.
    """
    if min_item is None or max_item is None:
        return []
    return [with_header(RANGE_HEADER, format_range(min_item, max_item))]


def window_from_response(response: requests.Response, items: Sequence[Any]) -> PaginationWindow:
    """
    Decode ``Content-Range``; without one, the page is taken to be the whole
    collection.
    """
    header = response.headers.get(CONTENT_RANGE_HEADER)
    if header is None:
        return PaginationWindow(0, max(len(items) - 1, 0), len(items))
    return parse_content_range(header)


class Endpoint:
    """
    Base class for a group of QRadar endpoint wrappers.
    """

    def __init__(self, http_client: QRadarHttpClient) -> None:
        self._http = http_client

    @staticmethod
    def _check_status(response: requests.Response, expected: Iterable[int], method: str, endpoint: str) -> None:
        """
        Raise APIError (with the response body as detail) for an unexpected status.
        """
        if response.status_code in expected:
            return

        body = response.text
        logger.error(f"QRadar API error - Status: {response.status_code}, {method} {endpoint}, Response: {body[:500]}")
        raise APIError(response.status_code, body)

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise IntegrationError(
                f"QRadar response did not contain valid JSON (status={response.status_code})"
            ) from exc

    def _call(
        self,
        response: requests.Response,
        method: str,
        endpoint: str,
        expected: Iterable[int],
    ) -> Any:
        with response:
            self._check_status(response, expected, method, endpoint)
            return self._decode(response)

    def _list(
        self,
        ctx: Optional[CallContext],
        endpoint: str,
        fields: str = "",
        filter: str = "",
        sort: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
        options: Sequence[Option] = (),
    ) -> PaginatedResponse:
        """
        GET a collection and wrap it with its pagination window.
        """
        all_options = [
            *query_options(fields, filter, sort),
            *options,
            *range_options(min_item, max_item),
        ]
        response = self._http.do(ctx, "GET", endpoint, *all_options)

        with response:
            self._check_status(response, OK, "GET", endpoint)
            items = self._decode(response)
            if items is None:
                items = []
            if not isinstance(items, list):
                raise IntegrationError(f"QRadar {endpoint} did not return a JSON list")
            window = window_from_response(response, items)

        return PaginatedResponse(total=window.total, min=window.min, max=window.max, items=items)

    def _get(
        self,
        ctx: Optional[CallContext],
        endpoint: str,
        fields: str = "",
        options: Sequence[Option] = (),
    ) -> Any:
        response = self._http.do(ctx, "GET", endpoint, *query_options(fields), *options)
        return self._call(response, "GET", endpoint, OK)

    def _send(
        self,
        ctx: Optional[CallContext],
        method: str,
        endpoint: str,
        payload: Any = _NO_BODY,
        fields: str = "",
        options: Sequence[Option] = (),
        expected: Iterable[int] = CREATED,
    ) -> Any:
        """
        POST/PUT with an optional JSON body.
        """
        all_options = [*query_options(fields), *options]
        if payload is _NO_BODY:
            response = self._http.do(ctx, method, endpoint, *all_options)
        else:
            response = self._http.send_json(ctx, method, endpoint, payload, *all_options)
        return self._call(response, method, endpoint, expected)

    def _upload(
        self,
        ctx: Optional[CallContext],
        method: str,
        endpoint: str,
        archive_path: str,
        fields: str = "",
        expected: Iterable[int] = CREATED,
    ) -> Any:
        """
        Send a zip archive read from ``archive_path`` as the raw request body.
        """
        try:
            with open(archive_path, "rb") as f:
                archive = f.read()
        except OSError as exc:
            raise IntegrationError(f"Error while opening the file {archive_path}: {exc}") from exc

        response = self._http.send_archive(ctx, method, endpoint, archive, *query_options(fields))
        return self._call(response, method, endpoint, expected)

    def _delete(
        self,
        ctx: Optional[CallContext],
        endpoint: str,
        options: Sequence[Option] = (),
        expected: Iterable[int] = NO_CONTENT,
    ) -> Any:
        response = self._http.do(ctx, "DELETE", endpoint, *options)
        return self._call(response, "DELETE", endpoint, expected)
