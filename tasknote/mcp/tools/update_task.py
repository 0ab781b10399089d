"""
Update Task MCP Tool
Updates task attributes
"""
from typing import Optional
from pydantic import Field, ValidationError

from ..server import mcp
from ..serializers import parse_priority, parse_due_date, task_to_dict
from ...dependencies import get_task_service
from ...utils.errors import TaskNotFoundException


@mcp.tool()
def update_task(
    task_id: int = Field(..., description="Task ID to update"),
    title: Optional[str] = Field(None, description="New title"),
    description: Optional[str] = Field(None, description="New description"),
    priority: Optional[str] = Field(None, description="New priority: low, medium, high, or urgent"),
    due_date: Optional[str] = Field(None, description="New due date (ISO format) or 'null' to clear"),
    category: Optional[str] = Field(None, description="New category label"),
) -> dict:
    """Update an existing task's attributes; omitted fields are left as they are."""
    service = get_task_service()
    try:
        task = service.get_task(task_id)
    except TaskNotFoundException:
        return {"error": "not_found", "message": f"Task with ID {task_id} not found"}

    # Build update data
    update_data = {}

    if title is not None:
        update_data["title"] = title

    if description is not None:
        update_data["description"] = description

    if priority is not None:
        parsed_priority = parse_priority(priority, default=None)
        if parsed_priority is not None:
            update_data["priority"] = parsed_priority

    if due_date is not None:
        if due_date.lower() == "null":
            update_data["due_date"] = None
        else:
            parsed_due_date = parse_due_date(due_date)
            if parsed_due_date is not None:
                update_data["due_date"] = parsed_due_date

    if category is not None:
        update_data["category"] = category

    if not update_data:
        return {"error": "validation_error", "message": "No valid fields to update"}

    try:
        updated = service.update_task(task, **update_data)
    except ValidationError as e:
        return {"error": "validation_error", "message": str(e)}

    if updated is None:
        return {"error": "database_error", "message": f"Task {task_id} could not be saved"}

    result = task_to_dict(updated)
    result["changes"] = sorted(update_data)
    return result
