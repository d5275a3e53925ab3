"""Utils package - Logging helpers."""

from salon_scheduling.utils.logger import configure_logging, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "configure_logging",
]
