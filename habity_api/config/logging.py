"""
Logging configuration for the Habity API service.

structlog renders through the standard library so uvicorn's and the
application's records share one handler.
"""

import sys
import logging
from typing import List, Optional

import structlog

from .settings import AppSettings


def _processors(log_format: str) -> List:
    """Processor chain ending in a console or JSON renderer."""
    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if log_format == "console"
        else structlog.processors.JSONRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_structured_logging(
    log_level: str = "INFO", log_format: str = "json", stream=None
) -> None:
    """
    Configure stdlib logging and structlog.

    Args:
        log_level: DEBUG, INFO, WARNING or ERROR
        log_format: 'console' or 'json'
        stream: Output stream, stdout by default
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(format="%(message)s", stream=stream or sys.stdout, level=level)
    logging.getLogger().setLevel(level)

    structlog.configure(
        processors=_processors(log_format),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__) -> structlog.BoundLogger:
    """Get a configured logger instance."""
    return structlog.get_logger(name)


def setup_application_logging(
    settings: Optional[AppSettings] = None,
) -> structlog.BoundLogger:
    """
    Setup logging for the application from its settings.

    Development uses the colored console renderer, every other
    environment emits JSON lines.

    Returns:
        Main application logger
    """
    settings = settings or AppSettings()
    log_format = "console" if settings.environment.lower() == "development" else "json"

    configure_structured_logging(log_level=settings.log_level, log_format=log_format)

    return get_logger("habity-api")
