"""
Task store for Tasknote
Stages inserts, updates and deletes and commits them atomically on save()
"""
from typing import Any, Callable, Dict, List

from sqlalchemy import delete
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select, func

from ..models.task import Task
from ..models.category import Category
from ..utils.errors import PersistenceError, TaskNotFoundException, CategoryNotFoundException, TaskNoteError
from ..utils.logging import get_logger

logger = get_logger(__name__)

PendingChange = Callable[[Session], None]


class TaskStore:
    """
    Persistence gateway for tasks and categories.

    Mutating calls only stage a change; nothing reaches the database until
    save() runs every staged change in a single transaction. Queries return
    detached rows, so callers may hold on to them between saves.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._pending: List[PendingChange] = []

    @property
    def has_pending_changes(self) -> bool:
        return bool(self._pending)

    # Staged task operations

    def add_task(self, task: Task) -> Task:
        self._pending.append(lambda session: session.add(task))
        return task

    def update_task(self, task_id: int, changes: Dict[str, Any]) -> None:
        def apply(session: Session) -> None:
            row = session.get(Task, task_id)
            if row is None:
                raise TaskNotFoundException(task_id)
            for field, value in changes.items():
                setattr(row, field, value)
            session.add(row)

        self._pending.append(apply)

    def delete_task(self, task_id: int) -> None:
        def apply(session: Session) -> None:
            row = session.get(Task, task_id)
            if row is None:
                raise TaskNotFoundException(task_id)
            session.delete(row)

        self._pending.append(apply)

    # Staged category operations

    def add_category(self, category: Category) -> Category:
        self._pending.append(lambda session: session.add(category))
        return category

    def update_category(self, category_id: int, changes: Dict[str, Any]) -> None:
        def apply(session: Session) -> None:
            row = session.get(Category, category_id)
            if row is None:
                raise CategoryNotFoundException(category_id)
            for field, value in changes.items():
                setattr(row, field, value)
            session.add(row)

        self._pending.append(apply)

    def delete_category(self, category_id: int) -> None:
        def apply(session: Session) -> None:
            row = session.get(Category, category_id)
            if row is None:
                raise CategoryNotFoundException(category_id)
            session.delete(row)

        self._pending.append(apply)

    def delete_all(self) -> None:
        """Stage removal of every task and category."""
        def apply(session: Session) -> None:
            session.execute(delete(Task))
            session.execute(delete(Category))

        self._pending.append(apply)

    # Unit of work

    def save(self) -> None:
        """
        Commit every staged change in one transaction.

        Raises:
            PersistenceError: If any staged change fails; nothing is committed
                and the staged changes are discarded
        """
        if not self._pending:
            return

        pending, self._pending = self._pending, []
        with Session(self.engine, expire_on_commit=False) as session:
            try:
                for change in pending:
                    change(session)
                session.commit()
            except (SQLAlchemyError, TaskNoteError) as e:
                session.rollback()
                raise PersistenceError(f"Failed to save {len(pending)} change(s): {e}") from e
        logger.debug("Saved %d change(s)", len(pending))

    def discard(self) -> None:
        self._pending.clear()

    # Queries

    def count_tasks(self) -> int:
        try:
            with Session(self.engine) as session:
                return session.exec(select(func.count(Task.id))).one()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to count tasks: {e}") from e

    def fetch_tasks(self, sort_by: str = "order_index", descending: bool = False) -> List[Task]:
        return self._fetch_all(Task, sort_by, descending)

    def fetch_categories(self, sort_by: str = "name", descending: bool = False) -> List[Category]:
        return self._fetch_all(Category, sort_by, descending)

    def _fetch_all(self, model: type, sort_by: str, descending: bool) -> List[Any]:
        if sort_by not in model.model_fields:
            raise ValueError(f"{model.__name__} has no field {sort_by!r} to sort by")

        column = getattr(model, sort_by)
        statement = select(model).order_by(column.desc() if descending else column.asc(), model.id)
        try:
            with Session(self.engine) as session:
                return list(session.exec(statement).all())
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to fetch {model.__name__} rows: {e}") from e


__all__ = ["TaskStore"]
