"""
Get Task MCP Tool
Retrieves a specific task by ID
"""
from pydantic import Field

from ..server import mcp
from ..serializers import task_to_dict
from ...dependencies import get_task_service
from ...utils.errors import TaskNotFoundException


@mcp.tool()
def get_task(
    task_id: int = Field(..., description="Task ID to retrieve"),
) -> dict:
    """Retrieve a specific task by ID."""
    try:
        task = get_task_service().get_task(task_id)
    except TaskNotFoundException:
        return {"error": "not_found", "message": f"Task with ID {task_id} not found"}
    return task_to_dict(task)
