"""
Logging Package
Structured logging for the render pipeline

Thin layer over the standard logging module; LoggerConfig attaches
JSON or text handlers to the package logger.
"""
from sanic_render.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
)
import logging
from typing import Optional

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'getLogger',
]


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Module-based names (containing '.') and Sanic's own loggers are used
    as given. Any other name, including None, is folded into the package
    logger so every render message shares one handler tree.

    Example:
        from sanic_render.logging import getLogger
        logger = getLogger(__name__)
        logger.warning("Cannot load view partial %s", path)
    """
    from sanic_render.defaults import DEFAULT_LOGGER_NAME

    if name and (name.startswith('sanic.') or '.' in name):
        return logging.getLogger(name)

    return logging.getLogger(DEFAULT_LOGGER_NAME)
