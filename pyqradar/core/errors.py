"""
Core error types for pyqradar.

Every exception raised by the library derives from ``QRadarError`` so that
callers can handle SDK failures in one place, or narrow down to the specific
condition (bad option, unparsable ``Content-Range``, network failure,
cancelled call, unexpected HTTP status).
"""

from __future__ import annotations

from typing import Optional


class QRadarError(Exception):
    """
    Base exception for all pyqradar errors.
    """


class ConfigError(QRadarError):
    """
    Raised when configuration is missing, invalid, or inconsistent.
    """


class ValidationError(QRadarError):
    """
    Raised when caller-supplied input fails validation before any call is made.
    """


class ConfigurationError(QRadarError):
    """
    Raised when a request option fails to apply to the request configuration.
    """


class IntegrationError(QRadarError):
    """
    Raised when a call to the QRadar API fails or returns an unexpected response.
    """


class TransportError(IntegrationError):
    """
    Raised when the HTTP call could not be completed (DNS, refused
    connection, TLS failure, ...). The underlying exception is chained as
    ``__cause__``.
    """


class MalformedHeader(IntegrationError):
    """
    Raised when a ``Content-Range`` header does not follow the
    ``items <min>-<max>/<total>`` grammar.
    """

    def __init__(self, message: str, header: Optional[str] = None) -> None:
        super().__init__(message)
        self.header = header


class APIError(IntegrationError):
    """
    Raised by endpoint wrappers when QRadar answers with an unexpected status.
    """

    def __init__(self, status_code: int, body: str = "", message: Optional[str] = None) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message or f"QRadar API error {status_code}: {body}")


class ContextError(QRadarError):
    """
    Base class for call-context terminations.
    """


class Cancelled(ContextError):
    """
    Raised when the caller cancelled the call context.
    """


class DeadlineExceeded(ContextError):
    """
    Raised when the call context deadline elapsed before the call completed.
    """
