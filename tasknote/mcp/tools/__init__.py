"""
MCP Tools module for Tasknote
Contains all MCP tool definitions for task and category operations
"""
from .create_task import create_task
from .list_tasks import list_tasks
from .get_task import get_task
from .complete_task import complete_task
from .update_task import update_task
from .delete_task import delete_task
from .search_tasks import search_tasks
from .reorder_tasks import reorder_tasks
from .create_category import create_category
from .list_categories import list_categories
from .delete_category import delete_category
from .due_reminders import due_reminders

__all__ = [
    "create_task",
    "list_tasks",
    "get_task",
    "complete_task",
    "update_task",
    "delete_task",
    "search_tasks",
    "reorder_tasks",
    "create_category",
    "list_categories",
    "delete_category",
    "due_reminders",
]
