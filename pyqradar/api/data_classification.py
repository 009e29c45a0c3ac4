"""
Data classification endpoints: DSM event mappings, categories and QID records.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..http.context import CallContext
from .base import CREATED, OK, Endpoint, PaginatedResponse, path_segment


class DataClassificationEndpoint(Endpoint):
    """
    Wrappers for ``/data_classification``.
    """

    def list_dsm_event_mappings(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, "data_classification/dsm_event_mappings", fields, filter, "", min_item, max_item)

    def create_dsm_event_mapping(
        self,
        ctx: Optional[CallContext],
        data: Dict[str, Any],
        fields: str = "",
    ) -> Dict[str, Any]:
        return self._send(ctx, "POST", "data_classification/dsm_event_mappings", data, fields, expected=CREATED)

    def get_dsm_event_mapping(self, ctx: Optional[CallContext], mapping_id: int, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"data_classification/dsm_event_mappings/{path_segment(mapping_id)}", fields)

    def update_dsm_event_mapping(
        self,
        ctx: Optional[CallContext],
        mapping_id: int,
        data: Dict[str, Any],
        fields: str = "",
    ) -> Dict[str, Any]:
        return self._send(
            ctx,
            "POST",
            f"data_classification/dsm_event_mappings/{path_segment(mapping_id)}",
            data,
            fields,
            expected=OK,
        )

    def list_high_level_categories(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        sort: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, "data_classification/high_level_categories", fields, filter, sort, min_item, max_item)

    def get_high_level_category(self, ctx: Optional[CallContext], category_id: int, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"data_classification/high_level_categories/{path_segment(category_id)}", fields)

    def list_low_level_categories(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        sort: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, "data_classification/low_level_categories", fields, filter, sort, min_item, max_item)

    def get_low_level_category(self, ctx: Optional[CallContext], category_id: int, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"data_classification/low_level_categories/{path_segment(category_id)}", fields)

    def list_qid_records(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, "data_classification/qid_records", fields, filter, "", min_item, max_item)

    def create_qid_record(self, ctx: Optional[CallContext], data: Dict[str, Any], fields: str = "") -> Dict[str, Any]:
        return self._send(ctx, "POST", "data_classification/qid_records", data, fields, expected=CREATED)

    def get_qid_record(self, ctx: Optional[CallContext], qid_record_id: int, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"data_classification/qid_records/{path_segment(qid_record_id)}", fields)

    def update_qid_record(
        self,
        ctx: Optional[CallContext],
        qid_record_id: int,
        data: Dict[str, Any],
        fields: str = "",
    ) -> Dict[str, Any]:
        return self._send(
            ctx, "POST", f"data_classification/qid_records/{path_segment(qid_record_id)}", data, fields, expected=OK
        )
