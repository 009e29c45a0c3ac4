"""
Auth endpoints.
"""

from __future__ import annotations

from typing import Any, Optional

from ..http.context import CallContext
from .base import OK, Endpoint


class AuthEndpoint(Endpoint):
    def logout(self, ctx: Optional[CallContext], user: str) -> Any:
        """
        Invoke the logout of ``user``. QRadar answers with a JSON boolean.
        """
        return self._send(ctx, "POST", "auth/logout", user, expected=OK)
