"""
Create Task MCP Tool
Creates a new task at the end of the manual order
"""
from typing import Optional
from pydantic import Field, ValidationError

from ..server import mcp
from ..serializers import parse_priority, parse_due_date, task_to_dict
from ...dependencies import get_task_service
from ...models.task import UNCATEGORIZED


@mcp.tool()
def create_task(
    title: str = Field(..., description="Task title (1-200 chars)"),
    description: str = Field("", description="Detailed task description (max 1000 chars)"),
    priority: str = Field("medium", description="Task priority: low, medium, high, or urgent"),
    due_date: Optional[str] = Field(None, description="Due date in ISO format (YYYY-MM-DD or YYYY-MM-DDTHH:MM)"),
    category: str = Field(UNCATEGORIZED, description="Category label"),
) -> dict:
    """Create a new task; a reminder is scheduled when a due date is given."""
    service = get_task_service()
    try:
        task = service.create_task(
            title=title,
            description=description,
            due_date=parse_due_date(due_date),
            category=category or UNCATEGORIZED,
            priority=parse_priority(priority),
        )
    except ValidationError as e:
        return {"error": "validation_error", "message": str(e)}

    if task is None:
        return {"error": "database_error", "message": "Task could not be saved"}
    return task_to_dict(task)
