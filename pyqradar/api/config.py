"""
Config endpoints: log sources, deployment hosts, tunnels and license pool.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..http.context import CallContext
from .base import OK, Endpoint, PaginatedResponse, path_segment


LOG_SOURCE_MANAGEMENT = "config/event_sources/log_source_management"


class ConfigEndpoint(Endpoint):
    """
    Wrappers for ``/config``.
    """

    def list_log_sources(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        sort: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, f"{LOG_SOURCE_MANAGEMENT}/log_sources", fields, filter, sort, min_item, max_item)

    def list_log_source_groups(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, f"{LOG_SOURCE_MANAGEMENT}/log_source_groups", fields, filter, "", min_item, max_item)

    def list_log_source_types(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, f"{LOG_SOURCE_MANAGEMENT}/log_source_types", fields, filter, "", min_item, max_item)

    def list_hosts(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, "config/deployment/hosts", fields, filter, "", min_item, max_item)

    def get_host(self, ctx: Optional[CallContext], host_id: int, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"config/deployment/hosts/{path_segment(host_id)}", fields)

    def update_host(
        self,
        ctx: Optional[CallContext],
        host_id: int,
        data: Dict[str, Any],
        fields: str = "",
    ) -> Dict[str, Any]:
        """
        Update the EPS/FPM allocation of a managed host.
        """
        return self._send(ctx, "POST", f"config/deployment/hosts/{path_segment(host_id)}", data, fields, expected=OK)

    def list_tunnels(
        self,
        ctx: Optional[CallContext],
        host_id: int,
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(
            ctx, f"config/deployment/hosts/{path_segment(host_id)}/tunnels", fields, filter, "", min_item, max_item
        )

    def get_license_pool(self, ctx: Optional[CallContext], fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, "config/deployment/license_pool", fields)
