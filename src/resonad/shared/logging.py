"""Structured logging configuration.

Uses structlog for structured, contextual logging. Importing resonad only
attaches a NullHandler to the ``resonad`` stdlib logger, so records reach
whatever handlers the host application installed. configure_logging() is
opt-in and never touches the root logger or the global structlog config.
"""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

LOGGER_NAME = "resonad"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

_configured = False

# Shared processors
_shared_processors: list[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.processors.add_log_level,
    structlog.processors.StackInfoRenderer(),
    structlog.dev.set_exc_info,
    structlog.processors.TimeStamper(fmt="iso"),
]


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
    log_file: str | None = None,
) -> None:
    """Install resonad's own handler on the resonad logger.

    Records then render through structlog and no longer propagate to the
    host's handlers. Arguments left as None are read from settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format ("json" or "console")
        log_file: Optional log file path
    """
    global _configured
    if _configured:
        return

    if level is None or log_format is None:
        from resonad.shared.config import get_settings
        settings = get_settings()
        level = level or settings.log_level
        log_format = log_format or settings.log_format
        log_file = log_file or settings.log_file

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_shared_processors,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper()))
    package_logger.propagate = False

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    _configured = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Bound structured logger
    """
    return structlog.wrap_logger(
        logging.getLogger(name or LOGGER_NAME),
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
