# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from tasktracker.application.use_cases.todos.base import OwnerResolver
from tasktracker.domain.todos.entities import Todo, TodoChanges
from tasktracker.domain.todos.exceptions import TodoNotFoundError
from tasktracker.domain.todos.repositories import TodoRepository


class UpdateTodoUseCase:
    def __init__(self, *, owners: OwnerResolver, todos: TodoRepository) -> None:
        self._owners = owners
        self._todos = todos

    def execute(self, subject: str, todo_id: int, changes: TodoChanges) -> Todo:
        owner_id = self._owners.require(subject)
        updated = self._todos.update_for_owner(todo_id, owner_id, changes)
        if updated is None:
            raise TodoNotFoundError(todo_id)
        return updated
