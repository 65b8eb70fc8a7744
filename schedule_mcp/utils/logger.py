"""Logging configuration for Schedule MCP."""

import logging

from schedule_mcp.config import get_settings

PACKAGE_LOGGER = "schedule_mcp"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _configure_package_logger() -> logging.Logger:
    root = logging.getLogger(PACKAGE_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(get_settings().log_level)
    return root


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the schedule_mcp hierarchy.

    The package logger gets a single stream handler the first time any module
    asks for a logger; module loggers propagate to it.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    _configure_package_logger()
    return logging.getLogger(name)
