"""
Shared service instances for the MCP tools and the API routes
"""
from typing import Optional

from .database.database import get_engine
from .database.store import TaskStore
from .services.task_service import TaskService
from .services.theme_service import ThemeManager

_task_service: Optional[TaskService] = None
_theme_manager: Optional[ThemeManager] = None


def get_task_service() -> TaskService:
    """Return the process-wide TaskService, building it on first use."""
    global _task_service
    if _task_service is None:
        _task_service = TaskService(TaskStore(get_engine()))
    return _task_service


def set_task_service(service: Optional[TaskService]) -> None:
    """Replace (or with None, reset) the shared TaskService."""
    global _task_service
    _task_service = service


def get_theme_manager() -> ThemeManager:
    global _theme_manager
    if _theme_manager is None:
        _theme_manager = ThemeManager()
    return _theme_manager


def set_theme_manager(manager: Optional[ThemeManager]) -> None:
    global _theme_manager
    _theme_manager = manager


__all__ = [
    "get_task_service",
    "set_task_service",
    "get_theme_manager",
    "set_theme_manager",
]
