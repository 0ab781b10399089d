"""
HTTP API for Tasknote
"""
from .routes import tasks_router

__all__ = ["tasks_router"]
