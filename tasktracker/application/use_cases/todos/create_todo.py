# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from tasktracker.application.use_cases.todos.base import OwnerResolver
from tasktracker.domain.todos.entities import Todo, normalize_title
from tasktracker.domain.todos.exceptions import TitleRequiredError, UnknownOwnerError
from tasktracker.domain.todos.repositories import TodoRepository


def _utcnow() -> datetime:
    return datetime.now(UTC)


class CreateTodoUseCase:
    def __init__(
        self,
        *,
        owners: OwnerResolver,
        todos: TodoRepository,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._owners = owners
        self._todos = todos
        self._clock = clock

    def execute(self, subject: str, title: str | None) -> Todo:
        owner_id = self._owners.resolve(subject)
        if owner_id is None:
            raise UnknownOwnerError()
        normalized = normalize_title(title)
        if normalized is None:
            raise TitleRequiredError()
        todo = Todo(
            id=0,
            owner_id=owner_id,
            title=normalized,
            completed=False,
            created_at=self._clock(),
        )
        return self._todos.add(todo)
