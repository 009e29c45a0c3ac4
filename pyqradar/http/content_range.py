"""
Codec for QRadar's item-based pagination headers.

Requests ask for a window with ``Range: items=<min>-<max>``; responses
describe what was returned with ``Content-Range: items <min>-<max>/<total>``,
or ``items */<total>`` when the server could not resolve the window. Note the
``=`` in the request form and the space in the response form.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..core.errors import MalformedHeader, ValidationError


RANGE_UNIT = "items"
UNRESOLVED = "*"

_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class PaginationWindow:
    """
    Slice ``min``..``max`` (inclusive) of a collection of ``total`` items.

    An unresolved window is reported as ``min == max == 0``.
    """

    min: int
    max: int
    total: int

    def as_tuple(self):
        return (self.min, self.max, self.total)


def _parse_count(text: str, what: str, header: str) -> int:
    if not _DIGITS.fullmatch(text):
        raise MalformedHeader(f"content-range {what} is not a non-negative integer: {text!r}", header=header)
    return int(text)


def parse_content_range(header: str) -> PaginationWindow:
    """
    Decode a ``Content-Range`` value into a ``PaginationWindow``.

    The leading ``items`` unit is optional. Raises ``MalformedHeader`` for
    anything that does not match ``<min>-<max>/<total>`` or ``*/<total>``.
    """
    if not isinstance(header, str):
        raise MalformedHeader(f"content-range must be a string, got {type(header).__name__}")

    trimmed = header.strip()
    if trimmed.startswith(RANGE_UNIT):
        trimmed = trimmed[len(RANGE_UNIT):].strip()

    # Split min-max and total
    parts = trimmed.split("/")
    if len(parts) != 2:
        raise MalformedHeader("error when splitting the content-range with slash", header=header)
    window, total_text = parts

    if window == UNRESOLVED:
        return PaginationWindow(0, 0, _parse_count(total_text, "total", header))

    # Split min and max
    bounds = window.split("-")
    if len(bounds) != 2:
        raise MalformedHeader("error when splitting the content-range with dash", header=header)

    first = _parse_count(bounds[0], "min", header)
    last = _parse_count(bounds[1], "max", header)
    total = _parse_count(total_text, "total", header)

    if first > last:
        raise MalformedHeader(f"content-range min {first} is greater than max {last}", header=header)
    if last > total:
        raise MalformedHeader(f"content-range max {last} is greater than total {total}", header=header)

    return PaginationWindow(first, last, total)


def format_range(min_item: int, max_item: int) -> str:
    """
    Encode a zero-based inclusive window as a ``Range`` request header value.
    """
    for name, value in (("min", min_item), ("max", max_item)):
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValidationError(f"range {name} must be a non-negative integer, got {value!r}")
    if min_item > max_item:
        raise ValidationError(f"range min {min_item} is greater than max {max_item}")
    return f"{RANGE_UNIT}={min_item}-{max_item}"


def format_content_range(window: PaginationWindow, resolved: bool = True) -> str:
    """
    Encode a window as a ``Content-Range`` response header value.

    ``resolved=False`` produces the ``items */<total>`` form.
    """
    if not resolved:
        return f"{RANGE_UNIT} {UNRESOLVED}/{window.total}"
    return f"{RANGE_UNIT} {window.min}-{window.max}/{window.total}"
