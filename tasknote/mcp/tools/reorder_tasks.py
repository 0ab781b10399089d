"""
Reorder Tasks MCP Tool
Moves tasks within the current list and renumbers the manual order
"""
from typing import List
from pydantic import Field

from ..server import mcp
from ..serializers import task_to_dict
from ...dependencies import get_task_service


@mcp.tool()
def reorder_tasks(
    from_positions: List[int] = Field(..., description="0-based positions in the current list to move"),
    to_position: int = Field(..., description="0-based position the moved tasks should start at"),
) -> dict:
    """Reorder the currently listed tasks (as filtered and sorted by the last list_tasks call)."""
    service = get_task_service()
    try:
        reordered = service.reorder_tasks(from_positions, to_position)
    except IndexError as e:
        return {"error": "validation_error", "message": str(e)}

    if not reordered:
        return {"error": "database_error", "message": "New order could not be saved"}

    return {
        "reordered": True,
        "tasks": [task_to_dict(task) for task in service.filtered_tasks],
    }
