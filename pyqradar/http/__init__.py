"""
Request/response plumbing shared by every QRadar endpoint wrapper.
"""

from .content_range import PaginationWindow, format_content_range, format_range, parse_content_range
from .context import CallContext
from .options import Option, RequestOptions, with_header, with_param
from .qradar_http import QRadarHttpClient

__all__ = [
    "CallContext",
    "Option",
    "PaginationWindow",
    "QRadarHttpClient",
    "RequestOptions",
    "format_content_range",
    "format_range",
    "parse_content_range",
    "with_header",
    "with_param",
]
