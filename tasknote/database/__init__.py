"""
Database module for Tasknote
Engine setup and the task store (persistence gateway)
"""
from .database import create_db_engine, create_db_and_tables, get_engine
from .store import TaskStore

__all__ = [
    "create_db_engine",
    "create_db_and_tables",
    "get_engine",
    "TaskStore",
]
