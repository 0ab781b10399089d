"""
Delete Task MCP Tool
Permanently deletes a task and cancels its reminder
"""
from pydantic import Field

from ..server import mcp
from ...dependencies import get_task_service
from ...utils.errors import TaskNotFoundException


@mcp.tool()
def delete_task(
    task_id: int = Field(..., description="Task ID to delete"),
) -> dict:
    """Permanently delete a task."""
    service = get_task_service()
    try:
        task = service.get_task(task_id)
    except TaskNotFoundException:
        return {"error": "not_found", "message": f"Task with ID {task_id} not found", "deleted": False}

    if not service.delete_task(task):
        return {"error": "database_error", "message": f"Task {task_id} could not be deleted", "deleted": False}

    return {
        "deleted": True,
        "task_id": task_id,
        "title": task.title,
    }
