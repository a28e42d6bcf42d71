"""Logging configuration helpers."""

from __future__ import annotations

import logging
from typing import Optional

from pyfsm.core.config import LoggingConfig

PACKAGE_LOGGER = "pyfsm"

_installed_handler: Optional[logging.Handler] = None


def configure_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """Attach a formatted stream handler to the package logger."""
    global _installed_handler

    config = config or LoggingConfig()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(config.numeric_level)

    if _installed_handler is not None:
        logger.removeHandler(_installed_handler)
        _installed_handler = None

    if config.console:
        handler = logging.StreamHandler()
        handler.setLevel(config.numeric_level)
        handler.setFormatter(_build_formatter(config))
        logger.addHandler(handler)
        _installed_handler = handler

    return logger


def _build_formatter(config: LoggingConfig) -> logging.Formatter:
    return logging.Formatter(fmt=config.fmt, datefmt=config.datefmt)
