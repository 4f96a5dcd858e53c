# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Todo, TodoChanges


class TodoRepository(Protocol):
    def list_for_owner(self, owner_id: int) -> Sequence[Todo]: ...
    def add(self, todo: Todo) -> Todo: ...
    def find_for_owner(self, todo_id: int, owner_id: int) -> Todo | None: ...
    def update_for_owner(
        self, todo_id: int, owner_id: int, changes: TodoChanges
    ) -> Todo | None: ...
    def delete_for_owner(self, todo_id: int, owner_id: int) -> bool: ...
