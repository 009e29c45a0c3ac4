"""
Help endpoints: the API's own documentation objects.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..http.context import CallContext
from .base import Endpoint, PaginatedResponse, path_segment


class HelpEndpoint(Endpoint):
    """
    Wrappers for ``/help`` (endpoint, resource and version documentation).
    """

    def list_endpoints(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, "help/endpoints", fields, filter, "", min_item, max_item)

    def get_endpoint(self, ctx: Optional[CallContext], endpoint_id: int, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"help/endpoints/{path_segment(endpoint_id)}", fields)

    def list_resources(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, "help/resources", fields, filter, "", min_item, max_item)

    def get_resource(self, ctx: Optional[CallContext], resource_id: int, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"help/resources/{path_segment(resource_id)}", fields)

    def list_versions(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, "help/versions", fields, filter, "", min_item, max_item)

    def get_version(self, ctx: Optional[CallContext], version_id: int, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"help/versions/{path_segment(version_id)}", fields)
