"""
MCP Server setup for Tasknote
Uses FastMCP pattern to expose task operations as tools
"""
from mcp.server.fastmcp import FastMCP

from ..config import settings

# Initialize the MCP server
mcp = FastMCP(name=settings.mcp_server_name)

__all__ = ["mcp"]


def register_tools():
    """Register all MCP tools with the server. Call after server is created."""
    # Import tools here to avoid circular imports
    # Tools use @mcp.tool() decorator which registers them
    from .tools import (
        create_task,
        list_tasks,
        get_task,
        complete_task,
        update_task,
        delete_task,
        search_tasks,
        reorder_tasks,
        create_category,
        list_categories,
        delete_category,
        due_reminders,
    )
    return [
        create_task,
        list_tasks,
        get_task,
        complete_task,
        update_task,
        delete_task,
        search_tasks,
        reorder_tasks,
        create_category,
        list_categories,
        delete_category,
        due_reminders,
    ]


def run() -> None:
    """Entry point: register the tools and serve over stdio."""
    from ..utils.logging import configure_logging

    configure_logging()
    register_tools()
    mcp.run()
