"""
Reminder service for Tasknote
Keeps pending due-date reminders, one per task
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Protocol

from ..config import settings
from ..models.task import Task
from ..utils.errors import ReminderSchedulingError
from ..utils.logging import get_logger, log_error

logger = get_logger(__name__)


def reminder_identifier(task_id: Optional[int]) -> str:
    return f"task-{task_id}"


class NotificationScheduler(Protocol):
    """Anything that can schedule and cancel task reminders."""

    def schedule_reminder(self, task_id: int, fire_at: datetime, title: str, body: str) -> None: ...

    def cancel_reminder(self, task_id: int) -> None: ...

    def schedule_task_reminder(self, task: Task, title: Optional[str] = None) -> None: ...

    def cancel_all(self) -> None: ...


@dataclass
class Reminder:
    """A pending reminder"""
    identifier: str
    task_id: int
    fire_at: datetime
    title: str
    body: str


class ReminderService:
    """
    In-process notification scheduler.

    Reminders are keyed by "task-<id>", so scheduling a task that already has
    a pending reminder replaces it. pop_due() hands back reminders whose firing
    time has passed, for whatever delivers them.
    """

    def __init__(self):
        self._pending: Dict[str, Reminder] = {}

    def schedule_reminder(self, task_id: int, fire_at: datetime, title: str, body: str) -> None:
        if task_id is None:
            raise ReminderSchedulingError("Cannot schedule a reminder for an unsaved task")
        if fire_at is None:
            raise ReminderSchedulingError(f"Task {task_id} has no firing time")
        if fire_at.tzinfo is not None:
            fire_at = fire_at.astimezone().replace(tzinfo=None)

        identifier = reminder_identifier(task_id)
        self._pending[identifier] = Reminder(
            identifier=identifier,
            task_id=task_id,
            fire_at=fire_at,
            title=title,
            body=body,
        )
        logger.debug("Scheduled reminder %s at %s", identifier, fire_at.isoformat())

    def schedule_task_reminder(self, task: Task, title: Optional[str] = None) -> None:
        """
        Schedule the due-date reminder for a task.

        The notification title defaults to settings.reminder_title and the body
        is the task title. Tasks without a due date are skipped, and a
        scheduling failure is logged rather than raised.
        """
        if task.due_date is None:
            return
        try:
            self.schedule_reminder(task.id, task.due_date, title or settings.reminder_title, task.title)
        except ReminderSchedulingError as e:
            log_error(e, "ReminderService.schedule_task_reminder", task.id)

    def cancel_reminder(self, task_id: int) -> None:
        if self._pending.pop(reminder_identifier(task_id), None) is not None:
            logger.debug("Cancelled reminder for task %s", task_id)

    def cancel_all(self) -> None:
        self._pending.clear()

    def get(self, task_id: int) -> Optional[Reminder]:
        return self._pending.get(reminder_identifier(task_id))

    def pending(self) -> List[Reminder]:
        return sorted(self._pending.values(), key=lambda r: r.fire_at)

    def pop_due(self, now: Optional[datetime] = None) -> List[Reminder]:
        """Remove and return every reminder whose firing time is at or before now."""
        now = now or datetime.now()
        due = [r for r in self.pending() if r.fire_at <= now]
        for reminder in due:
            del self._pending[reminder.identifier]
        return due


__all__ = [
    "NotificationScheduler",
    "Reminder",
    "ReminderService",
    "reminder_identifier",
]
