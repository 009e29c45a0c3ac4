"""
Forensics endpoints: capture recoveries and case management.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..http.context import CallContext
from .base import CREATED, Endpoint, PaginatedResponse, path_segment


RECOVERIES = "forensics/capture/recoveries"
RECOVERY_TASKS = "forensics/capture/recovery_tasks"
CASE_MANAGEMENT = "forensics/case_management"


class ForensicsEndpoint(Endpoint):
    """
    Wrappers for ``/forensics``.
    """

    def list_recoveries(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, RECOVERIES, fields, filter, "", min_item, max_item)

    def create_recovery(self, ctx: Optional[CallContext], data: Dict[str, Any], fields: str = "") -> Dict[str, Any]:
        return self._send(ctx, "POST", RECOVERIES, data, fields, expected=CREATED)

    def get_recovery(self, ctx: Optional[CallContext], recovery_id: int, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"{RECOVERIES}/{path_segment(recovery_id)}", fields)

    def list_recovery_tasks(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, RECOVERY_TASKS, fields, filter, "", min_item, max_item)

    def get_recovery_task(self, ctx: Optional[CallContext], task_id: int, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"{RECOVERY_TASKS}/{path_segment(task_id)}", fields)

    def get_case_create_task(self, ctx: Optional[CallContext], task_id: int, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"{CASE_MANAGEMENT}/case_create_tasks/{path_segment(task_id)}", fields)

    def list_cases(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, f"{CASE_MANAGEMENT}/cases", fields, filter, "", min_item, max_item)

    def create_case(self, ctx: Optional[CallContext], data: Dict[str, Any], fields: str = "") -> Dict[str, Any]:
        """
        Create a case. QRadar answers with the case create task to poll.
        """
        return self._send(ctx, "POST", f"{CASE_MANAGEMENT}/cases", data, fields, expected=CREATED)

    def get_case(self, ctx: Optional[CallContext], case_id: int, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"{CASE_MANAGEMENT}/cases/{path_segment(case_id)}", fields)
