# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from tasktracker.application.use_cases.todos.base import OwnerResolver
from tasktracker.domain.todos.entities import Todo
from tasktracker.domain.todos.repositories import TodoRepository
from tasktracker.shared.logging import logger


class ListTodosUseCase:
    def __init__(self, *, owners: OwnerResolver, todos: TodoRepository) -> None:
        self._owners = owners
        self._todos = todos

    def execute(self, subject: str) -> Sequence[Todo]:
        owner_id = self._owners.resolve(subject)
        if owner_id is None:
            # An unknown subject lists nothing instead of failing; get/update/delete
            # answer 401 for the same situation.
            logger.warning("todos.list: subject does not resolve to a user")
            return []
        return self._todos.list_for_owner(owner_id)
