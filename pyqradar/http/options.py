"""
Per-call request configuration.

``RequestOptions`` accumulates query parameters and headers as multi-maps:
adding a value under an existing key appends instead of replacing. Options
are plain callables that mutate a ``RequestOptions``; ``with_param`` and
``with_header`` build the two kinds the endpoint wrappers use.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

from ..core.errors import ConfigurationError


def format_value(value: Any) -> str:
    """
    Render a parameter value the way QRadar expects it (booleans lowercase).
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class RequestOptions:
    """
    Query-parameter and header multi-maps for one request.
    """

    def __init__(self) -> None:
        self._params: List[Tuple[str, str]] = []
        self._headers: Dict[str, List[str]] = {}

    def add_param(self, key: str, value: Any) -> "RequestOptions":
        if not isinstance(key, str) or not key:
            raise ConfigurationError(f"query parameter key must be a non-empty string, got {key!r}")
        self._params.append((key, format_value(value)))
        return self

    def add_header(self, key: str, value: Any) -> "RequestOptions":
        if not isinstance(key, str) or not key:
            raise ConfigurationError(f"header key must be a non-empty string, got {key!r}")
        self._headers.setdefault(key, []).append(format_value(value))
        return self

    @property
    def params(self) -> List[Tuple[str, str]]:
        """Query parameters in insertion order, repeated keys included."""
        return list(self._params)

    @property
    def headers(self) -> Dict[str, List[str]]:
        """Header values grouped by key, in insertion order."""
        return {key: list(values) for key, values in self._headers.items()}

    def get_params(self, key: str) -> List[str]:
        return [value for k, value in self._params if k == key]

    def get_headers(self, key: str) -> List[str]:
        return list(self._headers.get(key, []))


Option = Callable[[RequestOptions], Any]


def with_param(key: str, value: Any) -> Option:
    """Append ``value`` under ``key`` in the query string."""

    def apply(options: RequestOptions) -> None:
        options.add_param(key, value)

    return apply


def with_header(key: str, value: Any) -> Option:
    """Append ``value`` under ``key`` in the request headers."""

    def apply(options: RequestOptions) -> None:
        options.add_header(key, value)

    return apply


def apply_options(*options: Option) -> RequestOptions:
    """
    Build a fresh ``RequestOptions`` from ``options`` applied in order.

    Stops at the first failing option. Failures that are not already a
    ``ConfigurationError`` are wrapped in one.
    """
    config = RequestOptions()
    for option in options:
        try:
            option(config)
        except ConfigurationError:
            raise
        except Exception as exc:
            raise ConfigurationError(f"failed to apply request option: {exc}") from exc
    return config
