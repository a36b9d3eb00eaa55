# src/wnlemma/core/logging_config.py
import logging
import sys

import structlog

from wnlemma.core.config import get_settings


def configure_logging() -> None:
    """Console logs for development, JSON lines when LOG_FORMAT=json."""
    settings = get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    # uvicorn and friends
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
