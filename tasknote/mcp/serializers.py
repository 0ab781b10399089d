"""
Dictionary views of tasks and categories returned by the MCP tools
"""
from datetime import datetime
from typing import Any, Dict, Optional

from ..models.task import Task, Priority
from ..models.category import Category
from ..utils.dates import format_due_date, is_overdue, relative_date_string


def parse_priority(value: Optional[str], default: Optional[Priority] = Priority.MEDIUM) -> Optional[Priority]:
    """Parse a priority name, falling back to default when it is missing or invalid."""
    if not value:
        return default
    try:
        return Priority(value.lower())
    except ValueError:
        return default


def parse_due_date(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO date or datetime; invalid input gives None."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def task_to_dict(task: Task, now: Optional[datetime] = None) -> Dict[str, Any]:
    due = task.due_date
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description or "",
        "category": task.category,
        "priority": task.priority.value,
        "completed": task.is_completed,
        "due_date": due.isoformat() if due else None,
        "due_label": f"{relative_date_string(due, now)} ({format_due_date(due)})" if due else None,
        "overdue": bool(due and not task.is_completed and is_overdue(due, now)),
        "order_index": task.order_index,
        "created_at": task.created_at.isoformat(),
        "modified_at": task.modified_at.isoformat(),
    }


def category_to_dict(category: Category, task_count: Optional[int] = None) -> Dict[str, Any]:
    data = {
        "id": category.id,
        "name": category.name,
        "color": category.color,
        "created_at": category.created_at.isoformat(),
    }
    if task_count is not None:
        data["task_count"] = task_count
    return data
