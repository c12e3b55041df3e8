"""Named stdlib loggers for safevalidation.

Everything logs under the ``safevalidation`` logger, which carries a
NullHandler so the library stays quiet until the application configures
logging itself or calls configure_logging().
"""

from __future__ import annotations

import logging

from .config import get_settings

ROOT_LOGGER = "safevalidation"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Logger namespaced under safevalidation, e.g. get_logger("result")."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(level: str | None = None) -> logging.Logger:
    """Set the package log level from settings (or an explicit level name)."""
    root = logging.getLogger(ROOT_LOGGER)
    resolved = (level or get_settings().effective_log_level).upper()
    root.setLevel(getattr(logging, resolved, logging.WARNING))
    return root
