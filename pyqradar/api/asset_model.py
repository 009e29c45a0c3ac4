"""
Asset model endpoints: assets, asset properties and asset saved searches.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..http.context import CallContext
from .base import ACCEPTED, OK, Endpoint, PaginatedResponse, path_segment


class AssetModelEndpoint(Endpoint):
    """
    Wrappers for ``/asset_model``.
    """

    def list_assets(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        sort: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, "asset_model/assets", fields, filter, sort, min_item, max_item)

    def update_asset(self, ctx: Optional[CallContext], asset_id: int, data: Dict[str, Any]) -> Any:
        """
        Update an asset. QRadar applies the change asynchronously (202).
        """
        return self._send(
            ctx, "POST", f"asset_model/assets/{path_segment(asset_id)}", data, expected=OK + ACCEPTED
        )

    def list_properties(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, "asset_model/properties", fields, filter, "", min_item, max_item)

    def list_saved_search_groups(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, "asset_model/saved_search_groups", fields, filter, "", min_item, max_item)

    def get_saved_search_group(self, ctx: Optional[CallContext], group_id: int, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"asset_model/saved_search_groups/{path_segment(group_id)}", fields)

    def update_saved_search_group(
        self,
        ctx: Optional[CallContext],
        group_id: int,
        data: Dict[str, Any],
        fields: str = "",
    ) -> Dict[str, Any]:
        return self._send(
            ctx, "POST", f"asset_model/saved_search_groups/{path_segment(group_id)}", data, fields, expected=OK
        )

    def delete_saved_search_group(self, ctx: Optional[CallContext], group_id: int) -> None:
        self._delete(ctx, f"asset_model/saved_search_groups/{path_segment(group_id)}")

    def list_saved_searches(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, "asset_model/saved_searches", fields, filter, "", min_item, max_item)

    def get_saved_search(self, ctx: Optional[CallContext], saved_search_id: int, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"asset_model/saved_searches/{path_segment(saved_search_id)}", fields)

    def update_saved_search(
        self,
        ctx: Optional[CallContext],
        saved_search_id: int,
        data: Dict[str, Any],
        fields: str = "",
    ) -> Dict[str, Any]:
        return self._send(
            ctx, "POST", f"asset_model/saved_searches/{path_segment(saved_search_id)}", data, fields, expected=OK
        )

    def delete_saved_search(self, ctx: Optional[CallContext], saved_search_id: int) -> None:
        self._delete(ctx, f"asset_model/saved_searches/{path_segment(saved_search_id)}")

    def list_saved_search_results(
        self,
        ctx: Optional[CallContext],
        saved_search_id: int,
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        """
        List the assets matched by an asset saved search.
        """
        return self._list(
            ctx,
            f"asset_model/saved_searches/{path_segment(saved_search_id)}/results",
            fields,
            filter,
            "",
            min_item,
            max_item,
        )
