"""
Logging helpers for Tasknote
"""
import logging
from typing import Optional

from ..config import settings

LOGGER_NAME = "tasknote"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root handler once and set the package log level."""
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger(LOGGER_NAME).setLevel((level or settings.log_level).upper())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not name:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def log_error(error: Exception, context: str, task_id: Optional[int] = None) -> None:
    """
    Log a caught error together with the operation it interrupted.

    Args:
        error: The exception that was caught
        context: Name of the failing operation, e.g. "TaskService.create_task"
        task_id: Optional task the operation was working on
    """
    logger = get_logger()
    if task_id is not None:
        logger.error("%s (task_id=%s): %s: %s", context, task_id, type(error).__name__, error)
    else:
        logger.error("%s: %s: %s", context, type(error).__name__, error)
    logger.debug("Traceback for %s", context, exc_info=error)


__all__ = ["configure_logging", "get_logger", "log_error"]
