"""
Complete Task MCP Tool
Marks a task as completed or reopens it (idempotent)
"""
from pydantic import Field

from ..server import mcp
from ..serializers import task_to_dict
from ...dependencies import get_task_service
from ...utils.errors import TaskNotFoundException


@mcp.tool()
def complete_task(
    task_id: int = Field(..., description="Task ID to complete"),
    completed: bool = Field(True, description="False reopens the task"),
) -> dict:
    """Set a task's completion state; does nothing if it is already in that state."""
    service = get_task_service()
    try:
        task = service.get_task(task_id)
    except TaskNotFoundException:
        return {"error": "not_found", "message": f"Task with ID {task_id} not found"}

    unchanged = task.is_completed == completed
    if not unchanged:
        task = service.toggle_task_completion(task)
        if task is None:
            return {"error": "database_error", "message": f"Task {task_id} could not be saved"}

    result = task_to_dict(task)
    result["unchanged"] = unchanged
    return result
