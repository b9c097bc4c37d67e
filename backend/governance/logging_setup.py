"""Structured logging setup for hosts embedding the engine."""

import logging
from typing import Optional

import structlog

from governance.config import get_settings


def configure_logging(debug: Optional[bool] = None, log_level: Optional[str] = None) -> None:
    """Configure structlog for the process.

    Args:
        debug: Use the console renderer instead of JSON. Defaults to settings.DEBUG.
        log_level: Minimum level name ("debug", "info", ...). Defaults to settings.LOG_LEVEL.
    """
    settings = get_settings()
    debug = settings.DEBUG if debug is None else debug
    level_name = (log_level or settings.LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
