"""
Access endpoints.
"""

from __future__ import annotations

from typing import Optional

from ..http.context import CallContext
from .base import Endpoint, PaginatedResponse


class AccessEndpoint(Endpoint):
    def list_login_attempts(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        sort: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        """
        List the login attempts recorded by QRadar.
        """
        return self._list(ctx, "access/login_attempts", fields, filter, sort, min_item, max_item)
