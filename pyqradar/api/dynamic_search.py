"""
Dynamic search endpoints: schemas and their fields/functions/operators, and
searches built from a JSON query definition.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..http.context import CallContext
from .base import CREATED, Endpoint, PaginatedResponse, path_segment


class DynamicSearchEndpoint(Endpoint):
    """
    Wrappers for ``/dynamic_search``.
    """

    def list_schemas(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, "dynamic_search/schemas", fields, filter, "", min_item, max_item)

    def get_schema(self, ctx: Optional[CallContext], name: str, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"dynamic_search/schemas/{path_segment(name)}", fields)

    def _list_schema_children(
        self,
        ctx: Optional[CallContext],
        name: str,
        child: str,
        fields: str,
        filter: str,
        min_item: Optional[int],
        max_item: Optional[int],
    ) -> PaginatedResponse:
        endpoint = f"dynamic_search/schemas/{path_segment(name)}/{child}"
        return self._list(ctx, endpoint, fields, filter, "", min_item, max_item)

    def list_schema_fields(
        self,
        ctx: Optional[CallContext],
        name: str,
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list_schema_children(ctx, name, "fields", fields, filter, min_item, max_item)

    def list_schema_functions(
        self,
        ctx: Optional[CallContext],
        name: str,
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list_schema_children(ctx, name, "functions", fields, filter, min_item, max_item)

    def list_schema_operators(
        self,
        ctx: Optional[CallContext],
        name: str,
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list_schema_children(ctx, name, "operators", fields, filter, min_item, max_item)

    def list_searches(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, "dynamic_search/searches", fields, filter, "", min_item, max_item)

    def create_search(self, ctx: Optional[CallContext], query: Dict[str, Any]) -> Dict[str, Any]:
        """
        Start a search.

        ``query`` is the JSON query definition, e.g.
        ``{"type": "EVENTS", "fields": [...], "filter": {...}}``. The returned
        document carries the ``handle`` used by the other search calls.
        """
        return self._send(ctx, "POST", "dynamic_search/searches", query, expected=CREATED)

    def get_search(self, ctx: Optional[CallContext], handle: str, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"dynamic_search/searches/{path_segment(handle)}", fields)

    def delete_search(self, ctx: Optional[CallContext], handle: str) -> None:
        self._delete(ctx, f"dynamic_search/searches/{path_segment(handle)}")

    def get_search_results(self, ctx: Optional[CallContext], handle: str) -> Dict[str, Any]:
        return self._get(ctx, f"dynamic_search/searches/{path_segment(handle)}/results")
