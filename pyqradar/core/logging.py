"""
Logging helpers for pyqradar.

Library modules only ask for named loggers (``pyqradar.http``,
``pyqradar.api``, ...). Nothing is installed on import: scripts that want
the error/warning/debug file layout call ``configure_logging`` once.

SEC tokens handed to a ``QRadarHttpClient`` are registered with
``register_secret`` and masked in every record that reaches a handler
installed here.
"""

from __future__ import annotations

import logging
import os
import threading
from typing import Optional, Set, Union

from .config import LoggingConfig


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s [%(message)s]"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MASK = "********"

# File name and threshold of each file handler, most severe first.
LOG_FILES = (
    ("error.log", logging.ERROR),
    ("warning.log", logging.WARNING),
    ("debug.log", logging.DEBUG),
)

_secrets: Set[str] = set()
_secrets_lock = threading.Lock()


def register_secret(value: str) -> None:
    """
    Mask ``value`` in records passing through the pyqradar handlers.
    """
    if not value:
        return
    with _secrets_lock:
        _secrets.add(value)


def mask_secrets(text: str) -> str:
    with _secrets_lock:
        secrets = sorted(_secrets, key=len, reverse=True)
    for secret in secrets:
        text = text.replace(secret, MASK)
    return text


class SecretFilter(logging.Filter):
    """
    Rewrite a record's message with registered secrets masked.

    The record is formatted once (``getMessage``) and its arguments dropped,
    so formatters downstream see the masked text.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = mask_secrets(message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True


def _handler(handler: logging.Handler, level: Union[int, str], formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(SecretFilter())
    return handler


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    Attach the pyqradar file and console handlers to the root logger.

    Idempotent: a second call is a no-op.

    Args:
        config: Log directory and level; defaults to ``LoggingConfig()``
    """
    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger()
    if getattr(root_logger, "_pyqradar_logging_configured", False):
        return

    level = config.log_level.upper()
    os.makedirs(config.log_dir, exist_ok=True)
    root_logger.setLevel(level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for filename, threshold in LOG_FILES:
        file_handler = logging.FileHandler(os.path.join(config.log_dir, filename))
        root_logger.addHandler(_handler(file_handler, threshold, formatter))
    root_logger.addHandler(_handler(logging.StreamHandler(), level, formatter))

    root_logger._pyqradar_logging_configured = True  # type: ignore[attr-defined]


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
