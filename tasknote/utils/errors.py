"""
Exceptions shared across Tasknote
"""
from typing import Optional


class TaskNoteError(Exception):
    """Base exception for Tasknote errors"""
    pass


class PersistenceError(TaskNoteError):
    """Raised when the task store fails to read or save"""
    pass


class TaskNotFoundException(TaskNoteError):
    """Raised when a task is not found"""
    def __init__(self, task_id: Optional[int]):
        self.task_id = task_id
        super().__init__(f"Task with ID {task_id} not found")


class CategoryNotFoundException(TaskNoteError):
    """Raised when a category is not found"""
    def __init__(self, category: object):
        self.category = category
        super().__init__(f"Category {category!r} not found")


class ReminderSchedulingError(TaskNoteError):
    """Raised when a reminder cannot be scheduled"""
    pass


__all__ = [
    "TaskNoteError",
    "PersistenceError",
    "TaskNotFoundException",
    "CategoryNotFoundException",
    "ReminderSchedulingError",
]
