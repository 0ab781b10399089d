"""
Delete Category MCP Tool
Removes a category and moves its tasks to Uncategorized
"""
from pydantic import Field

from ..server import mcp
from ...dependencies import get_task_service
from ...models.task import UNCATEGORIZED
from ...utils.errors import CategoryNotFoundException


@mcp.tool()
def delete_category(
    name: str = Field(..., description="Name of the category to delete"),
) -> dict:
    """Delete a category; its tasks are kept and relabelled Uncategorized."""
    service = get_task_service()
    try:
        category = service.get_category(name)
    except CategoryNotFoundException:
        return {"error": "not_found", "message": f"Category {name!r} not found", "deleted": False}

    reassigned = service.category_task_count(category.name)
    if not service.delete_category(category):
        return {"error": "database_error", "message": f"Category {name!r} could not be deleted", "deleted": False}

    return {
        "deleted": True,
        "name": category.name,
        "reassigned_tasks": reassigned,
        "reassigned_to": UNCATEGORIZED,
    }
