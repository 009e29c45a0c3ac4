"""
Reference data endpoints: maps, sets, tables and maps of sets.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..http.context import CallContext
from ..http.options import Option, with_param
from .base import ACCEPTED, OK, Endpoint, PaginatedResponse, path_segment


MAPS = "reference_data/maps"
SETS = "reference_data/sets"
TABLES = "reference_data/tables"
MAP_OF_SETS = "reference_data/map_of_sets"


class ReferenceDataEndpoint(Endpoint):
    """
    Wrappers for ``/reference_data``.

    Bulk loads POST the JSON body to ``<collection>/bulk_load/<name>``.
    Deletes are asynchronous: QRadar answers 202 with the delete task status.
    """

    def _bulk_load(
        self,
        ctx: Optional[CallContext],
        collection: str,
        name: str,
        data: Any,
        fields: str,
    ) -> Dict[str, Any]:
        return self._send(ctx, "POST", f"{collection}/bulk_load/{path_segment(name)}", data, fields, expected=OK)

    def _delete_collection(
        self,
        ctx: Optional[CallContext],
        collection: str,
        name: str,
        purge_only: bool,
        namespace: str,
        fields: str,
    ) -> Dict[str, Any]:
        options: List[Option] = [with_param("purge_only", purge_only)]
        if namespace:
            options.append(with_param("namespace", namespace))
        if fields:
            options.append(with_param("fields", fields))
        return self._delete(ctx, f"{collection}/{path_segment(name)}", options, expected=ACCEPTED)

    def list_maps(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, MAPS, fields, filter, "", min_item, max_item)

    def get_map(self, ctx: Optional[CallContext], name: str, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"{MAPS}/{path_segment(name)}", fields)

    def list_sets(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, SETS, fields, filter, "", min_item, max_item)

    def get_set(self, ctx: Optional[CallContext], name: str, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"{SETS}/{path_segment(name)}", fields)

    def list_tables(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, TABLES, fields, filter, "", min_item, max_item)

    def get_table(self, ctx: Optional[CallContext], name: str, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"{TABLES}/{path_segment(name)}", fields)

    def bulk_load_map(
        self,
        ctx: Optional[CallContext],
        name: str,
        data: Dict[str, str],
        fields: str = "",
    ) -> Dict[str, Any]:
        """
        Add or update key/value pairs in a reference map.
        """
        return self._bulk_load(ctx, MAPS, name, data, fields)

    def bulk_load_set(
        self,
        ctx: Optional[CallContext],
        name: str,
        values: List[str],
        fields: str = "",
    ) -> Dict[str, Any]:
        return self._bulk_load(ctx, SETS, name, values, fields)

    def bulk_load_table(
        self,
        ctx: Optional[CallContext],
        name: str,
        data: Dict[str, Dict[str, str]],
        fields: str = "",
    ) -> Dict[str, Any]:
        """
        Add or update rows of a reference table, keyed by outer key then column.
        """
        return self._bulk_load(ctx, TABLES, name, data, fields)

    def bulk_load_map_of_sets(
        self,
        ctx: Optional[CallContext],
        name: str,
        data: Dict[str, List[str]],
        fields: str = "",
    ) -> Dict[str, Any]:
        return self._bulk_load(ctx, MAP_OF_SETS, name, data, fields)

    def delete_map(
        self,
        ctx: Optional[CallContext],
        name: str,
        purge_only: bool = False,
        namespace: str = "",
        fields: str = "",
    ) -> Dict[str, Any]:
        """
        Delete a reference map, or only its contents when ``purge_only`` is set.
        """
        return self._delete_collection(ctx, MAPS, name, purge_only, namespace, fields)

    def delete_set(
        self,
        ctx: Optional[CallContext],
        name: str,
        purge_only: bool = False,
        namespace: str = "",
        fields: str = "",
    ) -> Dict[str, Any]:
        return self._delete_collection(ctx, SETS, name, purge_only, namespace, fields)

    def delete_table(
        self,
        ctx: Optional[CallContext],
        name: str,
        purge_only: bool = False,
        namespace: str = "",
        fields: str = "",
    ) -> Dict[str, Any]:
        return self._delete_collection(ctx, TABLES, name, purge_only, namespace, fields)

    def delete_map_of_sets(
        self,
        ctx: Optional[CallContext],
        name: str,
        purge_only: bool = False,
        namespace: str = "",
        fields: str = "",
    ) -> Dict[str, Any]:
        return self._delete_collection(ctx, MAP_OF_SETS, name, purge_only, namespace, fields)
