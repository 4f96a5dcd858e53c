# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from sqlalchemy.orm import Session

from tasktracker.domain.todos.entities import Todo as DomainTodo
from tasktracker.domain.todos.entities import TodoChanges
from tasktracker.domain.todos.repositories import TodoRepository
from tasktracker.infrastructure.db.models import Todo
from tasktracker.infrastructure.unit_of_work import unit_of_work_scope

# SQLite and most backends store ids as signed 64-bit integers
_MAX_ROW_ID = 2**63 - 1


def _storable_id(todo_id: int) -> bool:
    return 0 < todo_id <= _MAX_ROW_ID


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _to_domain(row: Todo) -> DomainTodo:
    return DomainTodo(
        id=row.id,
        owner_id=row.user_id,
        title=row.title,
        completed=bool(row.completed),
        created_at=_as_utc(row.created_at),
    )


class SqlAlchemyTodoRepository(TodoRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def list_for_owner(self, owner_id: int) -> Sequence[DomainTodo]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(Todo)
                .filter(Todo.user_id == owner_id)
                .order_by(Todo.created_at.desc(), Todo.id.desc())
                .all()
            )
            return [_to_domain(row) for row in rows]

    def add(self, todo: DomainTodo) -> DomainTodo:
        with unit_of_work_scope(self._session_factory) as session:
            row = Todo(
                user_id=todo.owner_id,
                title=todo.title,
                completed=todo.completed,
                created_at=todo.created_at,
            )
            session.add(row)
            session.flush()
            return _to_domain(row)

    def find_for_owner(self, todo_id: int, owner_id: int) -> DomainTodo | None:
        if not _storable_id(todo_id):
            return None
        with unit_of_work_scope(self._session_factory) as session:
            row = (
                session.query(Todo)
                .filter(Todo.id == todo_id, Todo.user_id == owner_id)
                .first()
            )
            return _to_domain(row) if row else None

    def update_for_owner(
        self, todo_id: int, owner_id: int, changes: TodoChanges
    ) -> DomainTodo | None:
        if not _storable_id(todo_id):
            return None
        with unit_of_work_scope(self._session_factory) as session:
            row = (
                session.query(Todo)
                .filter(Todo.id == todo_id, Todo.user_id == owner_id)
                .with_for_update()
                .first()
            )
            if row is None:
                return None
            updated = changes.apply(_to_domain(row))
            row.title = updated.title
            row.completed = updated.completed
            session.flush()
            return updated

    def delete_for_owner(self, todo_id: int, owner_id: int) -> bool:
        if not _storable_id(todo_id):
            return False
        with unit_of_work_scope(self._session_factory) as session:
            deleted = (
                session.query(Todo)
                .filter(Todo.id == todo_id, Todo.user_id == owner_id)
                .delete(synchronize_session=False)
            )
            return deleted > 0
