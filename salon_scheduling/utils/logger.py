"""Structured Logging - structlog configuration for the scheduling core.

Events are snake_case names with keyword context, e.g.
``logger.info("conflict_merge_proposed", target_id=3)``.
"""

import logging
import sys
from typing import Any

import structlog

from salon_scheduling.config.settings import Settings, get_settings


def _renderer(json: bool) -> Any:
    if json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(log_level: str = "INFO", *, json: bool = True) -> None:
    """Configure structured logging with structlog.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        json: Render JSON lines for log shipping. Plain key=value console
            lines otherwise.
    """
    level = getattr(logging, log_level.upper())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            _renderer(json),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)


def configure_logging(settings: Settings | None = None) -> None:
    """Configure logging from settings.

    Production always logs JSON; other environments follow LOG_JSON.
    The environment name is bound to every event.

    Args:
        settings: Settings to read. Uses the cached settings if omitted.
    """
    settings = settings or get_settings()
    setup_logging(
        settings.log_level,
        json=settings.log_json or settings.is_production,
    )
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(app_env=settings.app_env)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (usually __name__).

    Returns:
        Bound structlog logger.
    """
    return structlog.get_logger(name)
