"""
Ariel endpoints: event/flow databases, AQL searches and saved searches.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..core.errors import IntegrationError
from ..http.context import CallContext
from ..http.options import with_header, with_param
from .base import (
    ACCEPTED,
    CREATED,
    OK,
    Endpoint,
    PaginatedResponse,
    path_segment,
    range_options,
    window_from_response,
)


class ArielEndpoint(Endpoint):
    """
    Wrappers for ``/ariel``.
    """

    def list_databases(
        self,
        ctx: Optional[CallContext],
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, "ariel/databases", filter=filter, min_item=min_item, max_item=max_item)

    def get_database(self, ctx: Optional[CallContext], database_name: str, fields: str = "") -> Dict[str, Any]:
        """
        Retrieve the columns defined for ``database_name`` ("events" or "flows").
        """
        return self._get(ctx, f"ariel/databases/{path_segment(database_name)}", fields)

    def list_searches(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, "ariel/searches", fields, filter, "", min_item, max_item)

    def create_search(self, ctx: Optional[CallContext], query_expression: str) -> Dict[str, Any]:
        """
        Start an AQL search. The returned status document carries ``search_id``.
        """
        return self._send(
            ctx,
            "POST",
            "ariel/searches",
            options=[with_param("query_expression", query_expression)],
            expected=CREATED,
        )

    def get_search(self, ctx: Optional[CallContext], search_id: str, wait_seconds: Optional[int] = None) -> Dict[str, Any]:
        """
        Retrieve the status of a search.

        ``wait_seconds`` asks QRadar to hold the answer until the search
        completes or the wait elapses (``Prefer: wait=<n>``).
        """
        options = []
        if wait_seconds is not None:
            options.append(with_header("Prefer", f"wait={wait_seconds}"))
        return self._get(ctx, f"ariel/searches/{path_segment(search_id)}", options=options)

    def update_search(
        self,
        ctx: Optional[CallContext],
        search_id: str,
        save_results: Optional[bool] = None,
        status: str = "",
    ) -> Dict[str, Any]:
        """
        Save the results of a search, or cancel it with ``status="CANCELED"``.
        """
        options = []
        if save_results is not None:
            options.append(with_param("save_results", save_results))
        if status:
            options.append(with_param("status", status))
        return self._send(ctx, "POST", f"ariel/searches/{path_segment(search_id)}", options=options, expected=OK)

    def get_search_results(
        self,
        ctx: Optional[CallContext],
        search_id: str,
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        """
        Retrieve a page of search results.

        QRadar wraps the records in an object keyed by the queried database
        (``{"events": [...]}``); ``items`` holds the records themselves.
        """
        endpoint = f"ariel/searches/{path_segment(search_id)}/results"
        response = self._http.do(ctx, "GET", endpoint, *range_options(min_item, max_item))

        with response:
            self._check_status(response, OK, "GET", endpoint)
            document = self._decode(response)
            items = _result_records(document, endpoint)
            window = window_from_response(response, items)

        return PaginatedResponse(total=window.total, min=window.min, max=window.max, items=items)

    def delete_search(self, ctx: Optional[CallContext], search_id: str) -> Dict[str, Any]:
        return self._delete(ctx, f"ariel/searches/{path_segment(search_id)}", expected=ACCEPTED)

    def list_saved_searches(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, "ariel/saved_searches", fields, filter, "", min_item, max_item)

    def get_saved_search(self, ctx: Optional[CallContext], saved_search_id: int, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"ariel/saved_searches/{path_segment(saved_search_id)}", fields)

    def get_saved_search_dependent_task(
        self,
        ctx: Optional[CallContext],
        task_id: int,
        fields: str = "",
    ) -> Dict[str, Any]:
        return self._get(ctx, f"ariel/saved_search_dependent_tasks/{path_segment(task_id)}", fields)


def _result_records(document: Any, endpoint: str) -> list:
    if document is None:
        return []
    if isinstance(document, list):
        return document
    if isinstance(document, dict):
        for value in document.values():
            if isinstance(value, list):
                return value
        return []
    raise IntegrationError(f"QRadar {endpoint} returned an unexpected document")
