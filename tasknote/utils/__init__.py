"""
Utility helpers for Tasknote: errors, logging, and date formatting
"""
from .errors import (
    TaskNoteError,
    PersistenceError,
    TaskNotFoundException,
    CategoryNotFoundException,
    ReminderSchedulingError,
)
from .logging import configure_logging, get_logger, log_error

__all__ = [
    "TaskNoteError",
    "PersistenceError",
    "TaskNotFoundException",
    "CategoryNotFoundException",
    "ReminderSchedulingError",
    "configure_logging",
    "get_logger",
    "log_error",
]
