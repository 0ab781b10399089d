"""
List Tasks MCP Tool
Applies filters and a sort order and returns the resulting task list
"""
from typing import List, Literal, Optional
from pydantic import Field

from ..server import mcp
from ..serializers import parse_priority, task_to_dict
from ...dependencies import get_task_service


@mcp.tool()
def list_tasks(
    search: str = Field("", description="Text that must appear in the title or description"),
    categories: Optional[List[str]] = Field(None, description="Only these categories (empty: all)"),
    priorities: Optional[List[str]] = Field(None, description="Only these priorities (empty: all)"),
    show_completed: bool = Field(True, description="Include completed tasks"),
    sort: Literal["priority", "due_date", "creation_date", "alphabetical", "manual"] = Field("priority", description="Sort order"),
    limit: int = Field(50, description="Maximum number of tasks to return (1-100)"),
) -> dict:
    """List tasks matching every given filter, in the requested order."""
    # Clamp limit
    limit = max(1, min(100, limit))

    selected_priorities = {parse_priority(p, default=None) for p in priorities or []}
    selected_priorities.discard(None)

    service = get_task_service()
    tasks = service.update_filters(
        search_text=search,
        selected_categories=set(categories or []),
        selected_priorities=selected_priorities,
        show_completed=show_completed,
        sort_option=sort,
    )

    return {
        "tasks": [task_to_dict(task) for task in tasks[:limit]],
        "total": len(tasks),
        "filters_applied": {
            "search": search,
            "categories": sorted(service.selected_categories),
            "priorities": sorted(p.value for p in service.selected_priorities),
            "show_completed": show_completed,
            "sort": service.sort_option.value,
        },
    }
