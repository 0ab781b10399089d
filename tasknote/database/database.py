"""
Database engine setup for Tasknote
"""
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from ..config import settings

# Imported so the tables are registered on SQLModel.metadata
from ..models.task import Task  # noqa: F401
from ..models.category import Category  # noqa: F401

_IN_MEMORY_URLS = {"sqlite://", "sqlite:///:memory:"}

_engine: Optional[Engine] = None


def create_db_engine(database_url: Optional[str] = None, echo: Optional[bool] = None) -> Engine:
    """
    Create an engine for the given URL (defaults to settings.database_url).

    In-memory SQLite shares one connection so every session sees the same data.
    """
    url = database_url or settings.database_url
    kwargs = {}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in _IN_MEMORY_URLS:
            kwargs["poolclass"] = StaticPool
    return create_engine(url, echo=settings.database_echo if echo is None else echo, **kwargs)


def create_db_and_tables(engine: Engine) -> None:
    SQLModel.metadata.create_all(engine)


def get_engine() -> Engine:
    """Process-wide engine, created and migrated on first use."""
    global _engine
    if _engine is None:
        _engine = create_db_engine()
        create_db_and_tables(_engine)
    return _engine


__all__ = [
    "create_db_engine",
    "create_db_and_tables",
    "get_engine",
]
