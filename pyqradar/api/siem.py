"""
SIEM endpoints: offenses and offense notes.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..http.context import CallContext
from ..http.options import with_param
from .base import CREATED, OK, Endpoint, PaginatedResponse, path_segment


class SIEMEndpoint(Endpoint):
    """
    Wrappers for ``/siem``.
    """

    def list_offenses(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        sort: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        """
        List offenses matching ``filter`` (e.g. ``status=OPEN``).
        """
        return self._list(ctx, "siem/offenses", fields, filter, sort, min_item, max_item)

    def get_offense(self, ctx: Optional[CallContext], offense_id: int, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"siem/offenses/{path_segment(offense_id)}", fields)

    def update_offense(
        self,
        ctx: Optional[CallContext],
        offense_id: int,
        updates: Dict[str, Any],
        fields: str = "",
    ) -> Dict[str, Any]:
        """
        Update an offense.

        QRadar takes the changes as query parameters, e.g.
        ``{"status": "CLOSED", "closing_reason_id": 1}`` or
        ``{"assigned_to": "admin", "follow_up": True}``.
        """
        options = [with_param(key, value) for key, value in updates.items()]
        return self._send(
            ctx, "POST", f"siem/offenses/{path_segment(offense_id)}", fields=fields, options=options, expected=OK
        )

    def list_offense_notes(
        self,
        ctx: Optional[CallContext],
        offense_id: int,
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(
            ctx, f"siem/offenses/{path_segment(offense_id)}/notes", fields, filter, "", min_item, max_item
        )

    def create_offense_note(
        self,
        ctx: Optional[CallContext],
        offense_id: int,
        note_text: str,
        fields: str = "",
    ) -> Dict[str, Any]:
        return self._send(
            ctx,
            "POST",
            f"siem/offenses/{path_segment(offense_id)}/notes",
            fields=fields,
            options=[with_param("note_text", note_text)],
            expected=CREATED,
        )
