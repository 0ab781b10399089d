"""Shared builders for the test suite."""
import inspect
from datetime import datetime, timedelta
from typing import Optional

from pydantic.fields import FieldInfo

from tasknote.database.database import create_db_engine, create_db_and_tables
from tasknote.database.store import TaskStore
from tasknote.models.task import Task, Priority, UNCATEGORIZED
from tasknote.services.reminder_service import ReminderService
from tasknote.services.task_service import TaskService

BASE_TIME = datetime(2025, 3, 21, 9, 0)


def make_store() -> TaskStore:
    """A TaskStore over a fresh in-memory SQLite database."""
    engine = create_db_engine("sqlite://", echo=False)
    create_db_and_tables(engine)
    return TaskStore(engine)


def make_service(store: Optional[TaskStore] = None) -> TaskService:
    return TaskService(
        store or make_store(),
        reminders=ReminderService(),
        reminder_title="Task Reminder",
        suggestion_limit=5,
    )


def make_task(
    task_id: int,
    title: str,
    description: str = "",
    priority: Priority = Priority.MEDIUM,
    category: str = UNCATEGORIZED,
    is_completed: bool = False,
    due_in_days: Optional[float] = None,
    created_minutes_ago: int = 0,
    order_index: int = 0,
) -> Task:
    """An unsaved Task with deterministic timestamps."""
    created_at = BASE_TIME - timedelta(minutes=created_minutes_ago)
    return Task(
        id=task_id,
        title=title,
        description=description,
        priority=priority,
        category=category,
        is_completed=is_completed,
        due_date=BASE_TIME + timedelta(days=due_in_days) if due_in_days is not None else None,
        created_at=created_at,
        modified_at=created_at,
        order_index=order_index,
    )


def call_tool(tool, **kwargs):
    """
    Call an MCP tool function directly.

    Tool parameters declare their defaults as pydantic Field objects, which the
    MCP server resolves; here they are resolved from the signature instead.
    """
    for name, parameter in inspect.signature(tool).parameters.items():
        if name in kwargs:
            continue
        default = parameter.default
        if isinstance(default, FieldInfo) and not default.is_required():
            kwargs[name] = default.get_default(call_default_factory=True)
    return tool(**kwargs)
