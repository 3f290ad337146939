"""
Logging configuration for pokespeare.

Structured logging through structlog, rendered by the stdlib logging
handler so uvicorn and httpx records share the same output.
"""

import logging
import sys

import structlog

from pokespeare.config import settings


def configure_logging(log_level: str | None = None, log_format: str | None = None) -> None:
    """Configure structured logging for the application.

    Args:
        log_level: Level name (debug, info, ...). Defaults to settings.log_level.
        log_format: "console" or "json". Defaults to settings.log_format.
    """
    level = getattr(logging, (log_level or settings.log_level).upper())

    if (log_format or settings.log_format) == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    structlog.contextvars.bind_contextvars(service="pokespeare")
