"""
List Categories MCP Tool
Lists categories with the number of tasks using each
"""
from ..server import mcp
from ..serializers import category_to_dict
from ...dependencies import get_task_service


@mcp.tool()
def list_categories() -> dict:
    """List all categories, sorted by name."""
    service = get_task_service()
    categories = [
        category_to_dict(category, task_count=service.category_task_count(category.name))
        for category in service.categories
    ]
    return {
        "categories": categories,
        "total": len(categories),
    }
