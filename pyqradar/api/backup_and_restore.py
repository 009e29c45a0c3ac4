"""
Backup and restore endpoints.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..http.context import CallContext
from ..http.options import with_header
from .base import ACCEPTED, CREATED, OK, Endpoint, PaginatedResponse, path_segment


class BackupAndRestoreEndpoint(Endpoint):
    """
    Wrappers for ``/backup_and_restore``.
    """

    def list_backups(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        sort: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, "backup_and_restore/backups", fields, filter, sort, min_item, max_item)

    def create_backup(
        self,
        ctx: Optional[CallContext],
        data: Dict[str, Any],
        backup_type: str = "",
        fields: str = "",
    ) -> Dict[str, Any]:
        """
        Start a backup. ``backup_type`` ("CONFIG" or "DATA") travels as a header.
        """
        options = [with_header("backup_type", backup_type)] if backup_type else []
        return self._send(
            ctx, "POST", "backup_and_restore/backups", data, fields, options, expected=CREATED + ACCEPTED
        )

    def get_backup(self, ctx: Optional[CallContext], backup_id: int, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"backup_and_restore/backups/{path_segment(backup_id)}", fields)

    def update_backup(
        self,
        ctx: Optional[CallContext],
        backup_id: int,
        data: Dict[str, Any],
        fields: str = "",
    ) -> Dict[str, Any]:
        return self._send(
            ctx, "POST", f"backup_and_restore/backups/{path_segment(backup_id)}", data, fields, expected=OK
        )

    def delete_backup(self, ctx: Optional[CallContext], backup_id: int) -> Dict[str, Any]:
        """
        Delete a backup. Deletion is asynchronous: QRadar answers 202 with the
        backup record.
        """
        return self._delete(ctx, f"backup_and_restore/backups/{path_segment(backup_id)}", expected=ACCEPTED)

    def list_restores(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        sort: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, "backup_and_restore/restores", fields, filter, sort, min_item, max_item)

    def create_restore(self, ctx: Optional[CallContext], data: Dict[str, Any], fields: str = "") -> Dict[str, Any]:
        return self._send(
            ctx, "POST", "backup_and_restore/restores", data, fields, expected=CREATED + ACCEPTED
        )

    def get_restore(self, ctx: Optional[CallContext], restore_id: int, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"backup_and_restore/restores/{path_segment(restore_id)}", fields)

    def update_restore(
        self,
        ctx: Optional[CallContext],
        restore_id: int,
        data: Dict[str, Any],
        fields: str = "",
    ) -> Dict[str, Any]:
        return self._send(
            ctx, "POST", f"backup_and_restore/restores/{path_segment(restore_id)}", data, fields, expected=OK
        )

    def delete_restore(self, ctx: Optional[CallContext], restore_id: int) -> None:
        self._delete(ctx, f"backup_and_restore/restores/{path_segment(restore_id)}")
