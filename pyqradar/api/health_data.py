"""
Health data endpoints.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..http.context import CallContext
from .base import Endpoint, PaginatedResponse


class HealthDataEndpoint(Endpoint):
    def get_security_data_count(self, ctx: Optional[CallContext], fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, "health_data/security_data_count", fields)

    def list_top_offenses(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, "health_data/top_offenses", fields, filter, "", min_item, max_item)

    def list_top_rules(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, "health_data/top_rules", fields, filter, "", min_item, max_item)
