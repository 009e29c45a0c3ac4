"""
pyqradar: a Python client for the IBM QRadar REST API.
"""

from .api import PaginatedResponse
from .client import QRadarClient
from .core.config import DEFAULT_API_VERSION, LoggingConfig, PyQRadarConfig, QRadarConfig, load_config
from .core.config_storage import load_config_from_file, save_config_to_file
from .core.errors import (
    APIError,
    Cancelled,
    ConfigError,
    ConfigurationError,
    ContextError,
    DeadlineExceeded,
    IntegrationError,
    MalformedHeader,
    QRadarError,
    TransportError,
    ValidationError,
)
from .core.logging import configure_logging
from .http import (
    CallContext,
    PaginationWindow,
    QRadarHttpClient,
    format_content_range,
    format_range,
    parse_content_range,
    with_header,
    with_param,
)

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "CallContext",
    "Cancelled",
    "ConfigError",
    "ConfigurationError",
    "ContextError",
    "DEFAULT_API_VERSION",
    "DeadlineExceeded",
    "IntegrationError",
    "LoggingConfig",
    "MalformedHeader",
    "PaginatedResponse",
    "PaginationWindow",
    "PyQRadarConfig",
    "QRadarClient",
    "QRadarConfig",
    "QRadarError",
    "QRadarHttpClient",
    "TransportError",
    "ValidationError",
    "configure_logging",
    "format_content_range",
    "format_range",
    "load_config",
    "load_config_from_file",
    "parse_content_range",
    "save_config_to_file",
    "with_header",
    "with_param",
]
