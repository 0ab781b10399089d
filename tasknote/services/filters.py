"""
Filtering, sorting and search suggestions over a list of tasks

Everything here is a pure function of its arguments; TaskService calls these
whenever its working set or filter parameters change.
"""
from datetime import datetime
from enum import Enum
from typing import Callable, Iterable, List, Optional, Sequence, Set, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ..models.task import Task, Priority

T = TypeVar("T")

TaskPredicate = Callable[[Task], bool]


class SortOption(str, Enum):
    """Orders the task list can be shown in"""
    PRIORITY = "priority"
    DUE_DATE = "due_date"
    CREATION_DATE = "creation_date"
    ALPHABETICAL = "alphabetical"
    MANUAL = "manual"

    @property
    def display_name(self) -> str:
        return _SORT_DISPLAY_NAMES[self]


_SORT_DISPLAY_NAMES = {
    SortOption.PRIORITY: "Priority",
    SortOption.DUE_DATE: "Due Date",
    SortOption.CREATION_DATE: "Creation Date",
    SortOption.ALPHABETICAL: "Alphabetical",
    SortOption.MANUAL: "Manual Order",
}


class TaskFilter(BaseModel):
    """Filter and sort parameters for the task list"""
    model_config = ConfigDict(extra="forbid")

    search_text: str = ""
    selected_categories: Set[str] = Field(default_factory=set)
    selected_priorities: Set[Priority] = Field(default_factory=set)
    show_completed: bool = True
    sort_option: SortOption = SortOption.PRIORITY

    @property
    def is_filtering(self) -> bool:
        """True when any predicate narrows the list."""
        return bool(
            self.search_text
            or self.selected_categories
            or self.selected_priorities
            or not self.show_completed
        )


def build_predicates(task_filter: TaskFilter) -> List[TaskPredicate]:
    """Return one predicate per active filter; an empty list lets everything through."""
    predicates: List[TaskPredicate] = []

    if task_filter.search_text:
        needle = task_filter.search_text.lower()
        predicates.append(
            lambda t: needle in t.title.lower() or needle in (t.description or "").lower()
        )

    if task_filter.selected_categories:
        categories = set(task_filter.selected_categories)
        predicates.append(lambda t: t.category in categories)

    if task_filter.selected_priorities:
        priorities = set(task_filter.selected_priorities)
        predicates.append(lambda t: t.priority in priorities)

    if not task_filter.show_completed:
        predicates.append(lambda t: not t.is_completed)

    return predicates


def apply_filters(tasks: Iterable[Task], task_filter: TaskFilter) -> List[Task]:
    predicates = build_predicates(task_filter)
    return [t for t in tasks if all(p(t) for p in predicates)]


def sort_tasks(tasks: Iterable[Task], sort_option: SortOption) -> List[Task]:
    """
    Sort tasks for display. All sorts are stable.

    - priority: highest rank first, then order_index
    - due_date: earliest first, tasks without a due date last
    - creation_date: newest first
    - alphabetical: title, case-insensitive
    - manual: order_index
    """
    if sort_option == SortOption.PRIORITY:
        return sorted(tasks, key=lambda t: (-t.priority.sort_order, t.order_index))
    if sort_option == SortOption.DUE_DATE:
        return sorted(tasks, key=lambda t: (t.due_date is None, t.due_date or datetime.min))
    if sort_option == SortOption.CREATION_DATE:
        return sorted(tasks, key=lambda t: t.created_at, reverse=True)
    if sort_option == SortOption.ALPHABETICAL:
        return sorted(tasks, key=lambda t: t.title.lower())
    if sort_option == SortOption.MANUAL:
        return sorted(tasks, key=lambda t: t.order_index)
    raise ValueError(f"Unknown sort option: {sort_option!r}")


def apply_filters_and_sort(tasks: Iterable[Task], task_filter: TaskFilter) -> List[Task]:
    return sort_tasks(apply_filters(tasks, task_filter), task_filter.sort_option)


def search_suggestions(tasks: Iterable[Task], text: str, limit: Optional[int] = 5) -> List[str]:
    """
    Words from task titles and descriptions that contain text.

    Words are whitespace-delimited and longer than two characters; the result
    is deduplicated, sorted and capped at limit.
    """
    if not text:
        return []

    needle = text.lower()
    suggestions = set()
    for task in tasks:
        words = task.title.split() + (task.description or "").split()
        for word in words:
            if len(word) > 2 and needle in word.lower():
                suggestions.add(word)

    return sorted(suggestions)[:limit]


def move_positions(items: Sequence[T], from_positions: Iterable[int], to_position: int) -> List[T]:
    """
    Move the items at from_positions so they start at to_position.

    The moved items keep their relative order; to_position indexes the list
    left after removing them and is clamped to its bounds.
    """
    indices = sorted(set(from_positions))
    for index in indices:
        if not 0 <= index < len(items):
            raise IndexError(f"Position {index} is out of range for {len(items)} item(s)")

    moving = [items[i] for i in indices]
    moved = set(indices)
    remaining = [item for i, item in enumerate(items) if i not in moved]
    to_position = max(0, min(to_position, len(remaining)))
    return remaining[:to_position] + moving + remaining[to_position:]


__all__ = [
    "SortOption",
    "TaskFilter",
    "build_predicates",
    "apply_filters",
    "sort_tasks",
    "apply_filters_and_sort",
    "search_suggestions",
    "move_positions",
]
