"""
Disaster recovery endpoints: Ariel copy profiles.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..http.context import CallContext
from .base import CREATED, OK, Endpoint, PaginatedResponse, path_segment


ARIEL_COPY_PROFILES = "disaster_recovery/ariel_copy_profiles"


class DisasterRecoveryEndpoint(Endpoint):
    """
    Wrappers for ``/disaster_recovery``.
    """

    def list_ariel_copy_profiles(
        self,
        ctx: Optional[CallContext],
        fields: str = "",
        filter: str = "",
        min_item: Optional[int] = None,
        max_item: Optional[int] = None,
    ) -> PaginatedResponse:
        return self._list(ctx, ARIEL_COPY_PROFILES, fields, filter, "", min_item, max_item)

    def create_ariel_copy_profile(
        self,
        ctx: Optional[CallContext],
        data: Dict[str, Any],
        fields: str = "",
    ) -> Dict[str, Any]:
        """
        Create a copy profile replicating Ariel data to a destination host.
        """
        return self._send(ctx, "POST", ARIEL_COPY_PROFILES, data, fields, expected=CREATED)

    def get_ariel_copy_profile(self, ctx: Optional[CallContext], profile_id: int, fields: str = "") -> Dict[str, Any]:
        return self._get(ctx, f"{ARIEL_COPY_PROFILES}/{path_segment(profile_id)}", fields)

    def update_ariel_copy_profile(
        self,
        ctx: Optional[CallContext],
        profile_id: int,
        data: Dict[str, Any],
        fields: str = "",
    ) -> Dict[str, Any]:
        return self._send(ctx, "POST", f"{ARIEL_COPY_PROFILES}/{path_segment(profile_id)}", data, fields, expected=OK)

    def delete_ariel_copy_profile(self, ctx: Optional[CallContext], profile_id: int) -> None:
        self._delete(ctx, f"{ARIEL_COPY_PROFILES}/{path_segment(profile_id)}")
