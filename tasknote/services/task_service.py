"""
Task service module for Tasknote
Owns the working set of tasks and categories and the filtered, sorted projection
"""
from datetime import datetime, timedelta
from typing import Any, Callable, Iterable, List, Optional, Set

from ..config import settings
from ..database.store import TaskStore
from ..models.task import Task, TaskCreate, TaskUpdate, Priority, UNCATEGORIZED
from ..models.category import Category, CategoryCreate, CategoryUpdate, DEFAULT_CATEGORY_COLOR
from ..utils.errors import (
    PersistenceError,
    ReminderSchedulingError,
    TaskNotFoundException,
    CategoryNotFoundException,
)
from ..utils.logging import get_logger, log_error
from .filters import (
    SortOption,
    TaskFilter,
    apply_filters_and_sort,
    move_positions,
    search_suggestions,
)
from .reminder_service import NotificationScheduler, ReminderService

logger = get_logger(__name__)

ProjectionListener = Callable[[List[Task]], None]

SAMPLE_CATEGORIES = [
    ("Work", "categoryWork"),
    ("Personal", "categoryPersonal"),
    ("Health", "categoryHealth"),
]

# (title, description, days until due, category, priority)
SAMPLE_TASKS = [
    ("Draft quarterly report", "Outline results and open risks for the review", 2, "Work", Priority.HIGH),
    ("Evening run", "5 km easy pace, stretch afterwards", 1, "Health", Priority.MEDIUM),
    ("Pick up groceries", "Rice, apples, coffee, spinach", 0, "Personal", Priority.LOW),
    ("Book dentist appointment", "Ask for a morning slot", 3, "Health", Priority.MEDIUM),
    ("Send client slides", "Final deck for Thursday's meeting", 1, "Work", Priority.URGENT),
]


class TaskService:
    """
    Filter/sort pipeline over the user's tasks.

    Holds the working set (tasks, categories) loaded from the store, the
    filter parameters, and filtered_tasks, the projection derived from both.
    Changing a filter parameter recomputes the projection and notifies
    subscribers. Mutators stage changes in the store, save, then reload the
    working set; a failed save is logged and leaves the working set as it was.

    Not safe for concurrent use; callers serialize access.
    """

    def __init__(
        self,
        store: TaskStore,
        reminders: Optional[NotificationScheduler] = None,
        task_filter: Optional[TaskFilter] = None,
        reminder_title: Optional[str] = None,
        suggestion_limit: Optional[int] = None,
    ):
        self.store = store
        self.reminders = reminders if reminders is not None else ReminderService()
        self.filter = task_filter or TaskFilter()
        self.reminder_title = reminder_title or settings.reminder_title
        self.suggestion_limit = suggestion_limit or settings.suggestion_limit

        self.tasks: List[Task] = []
        self.categories: List[Category] = []
        self.filtered_tasks: List[Task] = []
        self._listeners: List[ProjectionListener] = []

        self.refresh()

    # Projection

    def subscribe(self, listener: ProjectionListener) -> Callable[[], None]:
        """
        Call listener with the new projection after every recomputation.

        Returns:
            A callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def apply_filters_and_sort(self) -> List[Task]:
        self.filtered_tasks = apply_filters_and_sort(self.tasks, self.filter)
        for listener in list(self._listeners):
            try:
                listener(self.filtered_tasks)
            except Exception as e:
                log_error(e, "TaskService listener")
        return self.filtered_tasks

    def update_filters(self, **params: Any) -> List[Task]:
        """
        Set several filter parameters at once and recompute the projection once.

        Raises:
            ValidationError: If a parameter is unknown or has the wrong type
        """
        values = self.filter.model_dump()
        values.update(params)
        self.filter = TaskFilter.model_validate(values)
        return self.apply_filters_and_sort()

    def clear_filters(self) -> List[Task]:
        """Reset every filter to its default, keeping the sort option."""
        return self.update_filters(
            search_text="",
            selected_categories=set(),
            selected_priorities=set(),
            show_completed=True,
        )

    @property
    def search_text(self) -> str:
        return self.filter.search_text

    @search_text.setter
    def search_text(self, value: str) -> None:
        self.update_filters(search_text=value)

    @property
    def selected_categories(self) -> Set[str]:
        return set(self.filter.selected_categories)

    @selected_categories.setter
    def selected_categories(self, value: Iterable[str]) -> None:
        self.update_filters(selected_categories=set(value))

    @property
    def selected_priorities(self) -> Set[Priority]:
        return set(self.filter.selected_priorities)

    @selected_priorities.setter
    def selected_priorities(self, value: Iterable[Priority]) -> None:
        self.update_filters(selected_priorities=set(value))

    @property
    def show_completed(self) -> bool:
        return self.filter.show_completed

    @show_completed.setter
    def show_completed(self, value: bool) -> None:
        self.update_filters(show_completed=value)

    @property
    def sort_option(self) -> SortOption:
        return self.filter.sort_option

    @sort_option.setter
    def sort_option(self, value: SortOption) -> None:
        self.update_filters(sort_option=value)

    # Loading

    def refresh(self) -> None:
        self.fetch_categories()
        self.fetch_tasks()

    def fetch_tasks(self) -> None:
        try:
            self.tasks = self.store.fetch_tasks(sort_by="order_index")
        except PersistenceError as e:
            log_error(e, "TaskService.fetch_tasks")
            return
        self.apply_filters_and_sort()

    def fetch_categories(self) -> None:
        try:
            self.categories = self.store.fetch_categories(sort_by="name")
        except PersistenceError as e:
            log_error(e, "TaskService.fetch_categories")

    def get_task(self, task_id: int) -> Task:
        """
        Look up a task in the working set.

        Raises:
            TaskNotFoundException: If no task has this ID
        """
        for task in self.tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundException(task_id)

    def get_category(self, name: str) -> Category:
        """
        Look up a category by name, case-insensitively.

        Raises:
            CategoryNotFoundException: If no category has this name
        """
        for category in self.categories:
            if category.name.lower() == name.lower():
                return category
        raise CategoryNotFoundException(name)

    def _find_task(self, task_id: Optional[int], fallback: Task) -> Task:
        try:
            return self.get_task(task_id)
        except TaskNotFoundException:
            return fallback

    def _save(self, context: str, task_id: Optional[int] = None) -> bool:
        try:
            self.store.save()
            return True
        except PersistenceError as e:
            log_error(e, context, task_id)
            self.store.discard()
            return False

    # Reminders

    def _schedule_reminder(self, task: Task) -> None:
        self.reminders.schedule_task_reminder(task, self.reminder_title)

    def _cancel_reminder(self, task: Task) -> None:
        try:
            self.reminders.cancel_reminder(task.id)
        except ReminderSchedulingError as e:
            log_error(e, "TaskService._cancel_reminder", task.id)

    # Task operations

    def create_task(
        self,
        title: str,
        description: str = "",
        due_date: Optional[datetime] = None,
        category: str = UNCATEGORIZED,
        priority: Priority = Priority.MEDIUM,
    ) -> Optional[Task]:
        """
        Create a task at the end of the manual order.

        Args:
            title: Task title (must not be blank)
            description: Optional details
            due_date: Optional due date; a reminder is scheduled for it
            category: Category label
            priority: Task priority

        Returns:
            The created task, or None if it could not be saved

        Raises:
            ValidationError: If the title is empty or a field is invalid
        """
        task_data = TaskCreate(
            title=title,
            description=description,
            due_date=due_date,
            category=category,
            priority=priority,
        )

        try:
            order_index = self.store.count_tasks()
        except PersistenceError as e:
            log_error(e, "TaskService.create_task")
            return None

        task = Task(**task_data.model_dump(), order_index=order_index)
        self.store.add_task(task)
        if not self._save("TaskService.create_task"):
            return None

        self.fetch_tasks()
        created = self._find_task(task.id, task)
        self._schedule_reminder(created)
        return created

    def update_task(self, task: Task, **fields: Any) -> Optional[Task]:
        """
        Update only the fields given; modified_at is always refreshed.

        Passing due_date=None clears the due date. Afterwards the reminder is
        rescheduled if the task has a due date and is not completed, otherwise
        it is cancelled.

        Returns:
            The updated task, or None if it could not be saved

        Raises:
            TypeError: If a field name is not a task field
            ValidationError: If a value is invalid
        """
        unknown = set(fields) - set(TaskUpdate.model_fields)
        if unknown:
            raise TypeError(f"Unknown task field(s): {', '.join(sorted(unknown))}")

        changes = TaskUpdate(**fields).model_dump(exclude_unset=True)
        changes["modified_at"] = datetime.now()

        self.store.update_task(task.id, changes)
        if not self._save("TaskService.update_task", task.id):
            return None

        self.fetch_tasks()
        updated = self._find_task(task.id, task)
        if updated.due_date is not None and not updated.is_completed:
            self._schedule_reminder(updated)
        else:
            self._cancel_reminder(updated)
        return updated

    def delete_task(self, task: Task) -> bool:
        self._cancel_reminder(task)
        self.store.delete_task(task.id)
        if not self._save("TaskService.delete_task", task.id):
            return False

        self.fetch_tasks()
        return True

    def toggle_task_completion(self, task: Task) -> Optional[Task]:
        """
        Flip the completion flag.

        Completing a task cancels its reminder; reopening a task whose due date
        is still in the future schedules it again.
        """
        now = datetime.now()
        completed = not task.is_completed

        self.store.update_task(task.id, {"is_completed": completed, "modified_at": now})
        if not self._save("TaskService.toggle_task_completion", task.id):
            return None

        self.fetch_tasks()
        updated = self._find_task(task.id, task)
        if completed:
            self._cancel_reminder(updated)
        elif updated.due_date is not None and updated.due_date > now:
            self._schedule_reminder(updated)
        return updated

    def reorder_tasks(self, from_positions: Iterable[int], to_position: int) -> bool:
        """
        Move tasks within the current projection and renumber it.

        Every task in the projection gets order_index equal to its new
        position (0-based). Tasks hidden by the active filters keep their
        order_index, so indices across the full set may repeat or leave gaps.

        Raises:
            IndexError: If a from position is outside the projection
        """
        reordered = move_positions(self.filtered_tasks, from_positions, to_position)

        now = datetime.now()
        for index, task in enumerate(reordered):
            changes = {"order_index": index}
            if task.order_index != index:
                changes["modified_at"] = now
            self.store.update_task(task.id, changes)

        if not self._save("TaskService.reorder_tasks"):
            return False

        self.fetch_tasks()
        return True

    def search_suggestions(self, text: str) -> List[str]:
        return search_suggestions(self.tasks, text, limit=self.suggestion_limit)

    # Category operations

    def create_category(self, name: str, color: str = DEFAULT_CATEGORY_COLOR) -> Optional[Category]:
        """
        Create a category unless one with the same name exists (any case).

        Returns:
            The new category, or None if it already existed or could not be saved

        Raises:
            ValidationError: If the name is empty
        """
        category_data = CategoryCreate(name=name, color=color)
        if any(c.name.lower() == category_data.name.lower() for c in self.categories):
            logger.debug("Category %r already exists, skipping", category_data.name)
            return None

        category = Category(**category_data.model_dump())
        self.store.add_category(category)
        if not self._save("TaskService.create_category"):
            return None

        self.fetch_categories()
        return category

    def update_category(
        self,
        category: Category,
        name: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Optional[Category]:
        """
        Rename or recolor a category.

        A rename is not checked for uniqueness and does not touch tasks:
        tasks keep the old label until they are edited.
        """
        changes = CategoryUpdate(name=name, color=color).model_dump(exclude_none=True)
        if not changes:
            return category

        self.store.update_category(category.id, changes)
        if not self._save("TaskService.update_category"):
            return None

        self.fetch_categories()
        for updated in self.categories:
            if updated.id == category.id:
                return updated
        return category

    def delete_category(self, category: Category) -> bool:
        """Move the category's tasks to Uncategorized, then remove the category."""
        now = datetime.now()
        for task in self.tasks:
            if task.category == category.name:
                self.store.update_task(task.id, {"category": UNCATEGORIZED, "modified_at": now})
        self.store.delete_category(category.id)

        if not self._save("TaskService.delete_category"):
            return False

        self.refresh()
        return True

    def category_task_count(self, name: str) -> int:
        return sum(1 for task in self.tasks if task.category == name)

    # Bulk operations

    def delete_all_data(self) -> bool:
        """Delete every task and category and cancel all reminders."""
        self.store.delete_all()
        if not self._save("TaskService.delete_all_data"):
            return False

        try:
            self.reminders.cancel_all()
        except ReminderSchedulingError as e:
            log_error(e, "TaskService.delete_all_data")

        self.refresh()
        return True

    def prefill_sample_data(self) -> bool:
        """
        Seed default categories and a few sample tasks into an empty store.

        Returns:
            True if sample data was added
        """
        try:
            if self.store.count_tasks() > 0:
                return False
        except PersistenceError as e:
            log_error(e, "TaskService.prefill_sample_data")
            return False

        existing = {c.name.lower() for c in self.categories}
        for name, color in SAMPLE_CATEGORIES:
            if name.lower() not in existing:
                self.store.add_category(Category(name=name, color=color))

        today = datetime.now().replace(hour=9, minute=0, second=0, microsecond=0)
        sample_tasks = []
        for index, (title, description, days, category, priority) in enumerate(SAMPLE_TASKS):
            task = Task(
                title=title,
                description=description,
                due_date=today + timedelta(days=days),
                category=category,
                priority=priority,
                order_index=index,
            )
            sample_tasks.append(self.store.add_task(task))

        if not self._save("TaskService.prefill_sample_data"):
            return False

        for task in sample_tasks:
            self._schedule_reminder(task)

        self.refresh()
        return True


__all__ = ["TaskService", "SAMPLE_CATEGORIES", "SAMPLE_TASKS"]
