"""
MCP (Model Context Protocol) module for Tasknote
Exposes task operations as MCP tools
"""
from .server import mcp, register_tools, run

__all__ = [
    "mcp",
    "register_tools",
    "run",
]
