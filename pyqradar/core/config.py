"""
Configuration models and loading logic for pyqradar.

The goal of this module is to provide a single place where runtime
configuration (QRadar URL, SEC token, API version, timeouts, logging
settings) is defined and loaded from the environment.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Optional

from .errors import ConfigError


DEFAULT_API_VERSION = "12.0"


@dataclass(frozen=True)
class QRadarConfig:
    """
    Connection settings for a QRadar console.

    Frozen: the token and version are fixed once a client is built from it.
    """

    base_url: str
    token: str
    version: str = DEFAULT_API_VERSION
    timeout_seconds: Optional[int] = 30
    verify_ssl: bool = True


@dataclass
class LoggingConfig:
    """
    Logging-related configuration.
    """

    log_dir: str = "logs"
    log_level: str = "INFO"


@dataclass
class PyQRadarConfig:
    """
    Top-level configuration for pyqradar.
    """

    qradar: Optional[QRadarConfig] = None
    logging: Optional[LoggingConfig] = None


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def parse_bool(name: str, raw: str) -> bool:
    """
    Parse a boolean setting, raising ConfigError on anything unrecognised.
    """

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean (true/false), got {raw!r}")


def load_config() -> PyQRadarConfig:
    """
    Load pyqradar configuration from environment variables.

    Environment variables:
        PYQRADAR_BASE_URL: Base URL of the QRadar console (e.g. "https://qradar.local").
        PYQRADAR_TOKEN: Authorized service token sent in the ``SEC`` header.
        PYQRADAR_VERSION: API version sent in the ``Version`` header (default: "12.0").
        PYQRADAR_TIMEOUT_SECONDS: Default request timeout (default: 30).
        PYQRADAR_VERIFY_SSL: Whether to verify TLS certificates (default: true).

        PYQRADAR_LOG_DIR: Directory for log files (default: "logs").
        PYQRADAR_LOG_LEVEL: Root log level (default: "INFO").

    If neither the URL nor the token is set, the configuration is still
    returned with ``qradar`` set to None.
    """

    log_dir = os.getenv("PYQRADAR_LOG_DIR", "logs")
    log_level = os.getenv("PYQRADAR_LOG_LEVEL", "INFO")
    logging_cfg = LoggingConfig(log_dir=log_dir, log_level=log_level)

    base_url = os.getenv("PYQRADAR_BASE_URL")
    token = os.getenv("PYQRADAR_TOKEN")

    qradar_cfg: Optional[QRadarConfig]
    if base_url or token:
        # A half-configured connection is always a mistake.
        if not base_url:
            raise ConfigError("PYQRADAR_BASE_URL must be set when PYQRADAR_TOKEN is provided")
        if not token:
            raise ConfigError("PYQRADAR_TOKEN must be set when PYQRADAR_BASE_URL is provided")

        timeout_raw = os.getenv("PYQRADAR_TIMEOUT_SECONDS", "30")
        try:
            timeout_seconds = int(timeout_raw)
        except ValueError as exc:
            raise ConfigError("PYQRADAR_TIMEOUT_SECONDS must be an integer") from exc

        qradar_cfg = QRadarConfig(
            base_url=base_url,
            token=token,
            version=os.getenv("PYQRADAR_VERSION", DEFAULT_API_VERSION),
            timeout_seconds=timeout_seconds,
            verify_ssl=parse_bool("PYQRADAR_VERIFY_SSL", os.getenv("PYQRADAR_VERIFY_SSL", "true")),
        )
    else:
        qradar_cfg = None

    return PyQRadarConfig(qradar=qradar_cfg, logging=logging_cfg)
