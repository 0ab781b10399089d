"""
Search Tasks MCP Tool
Searches tasks by keyword and suggests completions
"""
from pydantic import Field

from ..server import mcp
from ..serializers import task_to_dict
from ...dependencies import get_task_service


@mcp.tool()
def search_tasks(
    query: str = Field(..., description="Search term"),
    limit: int = Field(20, description="Maximum results (1-50)"),
) -> dict:
    """
    Search tasks by keyword in title and description, keeping the other filters.

    The search text in effect before the call is restored afterwards, so the
    current list seen by list_tasks and reorder_tasks is unchanged.
    """
    if not query.strip():
        return {"error": "validation_error", "message": "Query cannot be empty"}

    # Clamp limit
    limit = max(1, min(50, limit))

    service = get_task_service()
    previous_search = service.search_text
    try:
        tasks = service.update_filters(search_text=query)
    finally:
        service.update_filters(search_text=previous_search)

    return {
        "tasks": [task_to_dict(task) for task in tasks[:limit]],
        "suggestions": service.search_suggestions(query),
        "query": query,
        "total": len(tasks),
    }
