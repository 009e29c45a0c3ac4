"""
Analytics endpoints.
"""

from __future__ import annotations

from typing import Optional

from ..http.context import CallContext
from .base import Endpoint, PaginatedResponse


class AnalyticsEndpoint(Endpoint):
    def list_rules(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, "analytics/rules", fields, filter, "", min_item, max_item)
