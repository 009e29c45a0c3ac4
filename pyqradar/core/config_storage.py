"""
Configuration storage and loading for pyqradar.

This module saves and loads the configuration as a JSON file so that
scripts can keep connection settings next to them instead of exporting
environment variables.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .config import (
    DEFAULT_API_VERSION,
    LoggingConfig,
    PyQRadarConfig,
    QRadarConfig,
    load_config,
)
from .errors import ConfigError


CONFIG_FILE = os.getenv("PYQRADAR_CONFIG_FILE", "pyqradar.json")


def _config_to_dict(config: PyQRadarConfig) -> Dict[str, Any]:
    """Convert PyQRadarConfig to a dictionary."""
    result: Dict[str, Any] = {
        "logging": {
            "log_dir": config.logging.log_dir if config.logging else "logs",
            "log_level": config.logging.log_level if config.logging else "INFO",
        },
    }

    if config.qradar:
        result["qradar"] = {
            "base_url": config.qradar.base_url,
            "token": config.qradar.token,
            "version": config.qradar.version,
            "timeout_seconds": config.qradar.timeout_seconds,
            "verify_ssl": config.qradar.verify_ssl,
        }

    return result


def _dict_to_config(data: Dict[str, Any]) -> PyQRadarConfig:
    """Convert a dictionary to PyQRadarConfig."""
    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a JSON object")

    logging_data = data.get("logging") or {}
    logging_cfg = LoggingConfig(
        log_dir=logging_data.get("log_dir", "logs"),
        log_level=logging_data.get("log_level", "INFO"),
    )

    qradar_cfg: Optional[QRadarConfig] = None
    qr_data = data.get("qradar")
    if qr_data:
        if not qr_data.get("base_url") or not qr_data.get("token"):
            raise ConfigError("qradar section requires both 'base_url' and 'token'")
        timeout = qr_data.get("timeout_seconds", 30)
        if timeout is not None and not isinstance(timeout, int):
            raise ConfigError("qradar.timeout_seconds must be an integer")
        qradar_cfg = QRadarConfig(
            base_url=qr_data["base_url"],
            token=qr_data["token"],
            version=str(qr_data.get("version", DEFAULT_API_VERSION)),
            timeout_seconds=timeout,
            verify_ssl=bool(qr_data.get("verify_ssl", True)),
        )

    return PyQRadarConfig(qradar=qradar_cfg, logging=logging_cfg)


def load_config_from_file(config_path: str = CONFIG_FILE) -> PyQRadarConfig:
    """
    Load configuration from a JSON file.

    If the file does not exist the configuration is read from the
    environment instead (see ``load_config``).

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    config_file = Path(config_path)

    if not config_file.exists():
        return load_config()

    try:
        with open(config_file, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to load config file: {e}") from e

    return _dict_to_config(data)


def save_config_to_file(config: PyQRadarConfig, config_path: str = CONFIG_FILE) -> None:
    """
    Save configuration to a JSON file.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_file = Path(config_path)

    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)

        data = _config_to_dict(config)
        with open(config_file, "w") as f:
            json.dump(data, f, indent=2)
    except OSError as e:
        raise ConfigError(f"Failed to save config file: {e}") from e
