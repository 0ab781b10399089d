"""
Create Category MCP Tool
Adds a category unless one with the same name already exists
"""
from pydantic import Field, ValidationError

from ..server import mcp
from ..serializers import category_to_dict
from ...dependencies import get_task_service
from ...models.category import DEFAULT_CATEGORY_COLOR
from ...utils.errors import CategoryNotFoundException


@mcp.tool()
def create_category(
    name: str = Field(..., description="Category name (unique, case-insensitive)"),
    color: str = Field(DEFAULT_CATEGORY_COLOR, description="Display color tag"),
) -> dict:
    """Create a category; an existing name (in any case) is left as it is."""
    service = get_task_service()
    try:
        category = service.create_category(name, color=color or DEFAULT_CATEGORY_COLOR)
    except ValidationError as e:
        return {"error": "validation_error", "message": str(e)}

    if category is not None:
        result = category_to_dict(category, task_count=service.category_task_count(category.name))
        result["created"] = True
        return result

    try:
        existing = service.get_category(name.strip())
    except CategoryNotFoundException:
        return {"error": "database_error", "message": f"Category {name!r} could not be saved"}

    result = category_to_dict(existing, task_count=service.category_task_count(existing.name))
    result["created"] = False
    return result
