"""
Task model for Tasknote
Defines the task entity, its priority scale, and the create/update schemas
"""
from datetime import datetime
from typing import Optional
from enum import Enum
from sqlmodel import Field, SQLModel
from pydantic import field_validator


# Label given to tasks whose category was deleted
UNCATEGORIZED = "Uncategorized"


class Priority(str, Enum):
    """Task priority levels"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"

    @property
    def sort_order(self) -> int:
        """Rank used by the priority sort (low=0 ... urgent=3)."""
        return _PRIORITY_RANKS[self]

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def color(self) -> str:
        return f"priority{self.value.capitalize()}"


_PRIORITY_RANKS = {
    Priority.LOW: 0,
    Priority.MEDIUM: 1,
    Priority.HIGH: 2,
    Priority.URGENT: 3,
}


def _clean_title(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Title cannot be empty")
    return value


def _local_naive(value: Optional[datetime]) -> Optional[datetime]:
    """Due dates are stored as naive local time; aware values are converted first."""
    if value is not None and value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


class TaskBase(SQLModel):
    """Base model for task with common fields"""
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=1000)
    due_date: Optional[datetime] = Field(default=None)
    category: str = Field(default=UNCATEGORIZED, max_length=100)
    priority: Priority = Field(default=Priority.MEDIUM)
    is_completed: bool = Field(default=False)


class Task(TaskBase, table=True):
    """Task model for database table"""
    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=datetime.now)
    modified_at: datetime = Field(default_factory=datetime.now)
    order_index: int = Field(default=0, index=True)

    @property
    def reminder_id(self) -> str:
        return f"task-{self.id}"


class TaskCreate(TaskBase):
    """Schema for creating a new task"""

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _clean_title(v)

    @field_validator("due_date")
    @classmethod
    def validate_due_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _local_naive(v)


class TaskUpdate(SQLModel):
    """Schema for updating task information (partial)"""
    title: Optional[str] = Field(default=None, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    due_date: Optional[datetime] = None
    category: Optional[str] = Field(default=None, max_length=100)
    priority: Optional[Priority] = None
    is_completed: Optional[bool] = None
    order_index: Optional[int] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            raise ValueError("Title cannot be empty")
        return _clean_title(v)

    @field_validator("description", "category", "priority", "is_completed", "order_index")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    @field_validator("due_date")
    @classmethod
    def validate_due_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _local_naive(v)


class TaskPublic(TaskBase):
    """Public representation of task"""
    id: int
    created_at: datetime
    modified_at: datetime
    order_index: int
