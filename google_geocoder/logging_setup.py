"""Logging setup for applications embedding the client.

The library itself only emits DEBUG records through module loggers and
never configures handlers on import.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config

LOGGER_NAME = "google_geocoder"


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling it again replaces the handler instead of stacking a new one.

    Returns:
        The package logger.
    """
    config = config or get_config().observability

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.level.upper())

    for handler in list(logger.handlers):
        if getattr(handler, "_google_geocoder", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.format))
    handler._google_geocoder = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
