# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from tasktracker.domain.exceptions import InvariantViolation


def normalize_title(title: str | None) -> str | None:
    """Trim a title; blank or missing titles normalize to ``None``."""
    if title is None:
        return None
    trimmed = title.strip()
    return trimmed or None


@dataclass(slots=True, frozen=True)
class Todo:

    id: int
    owner_id: int
    title: str
    completed: bool
    created_at: datetime

    def __post_init__(self) -> None:
        if not self.title or self.title != self.title.strip():
            raise InvariantViolation("title must be non-empty and trimmed", field="title")
        if self.created_at.tzinfo is None:
            raise InvariantViolation("created_at must be timezone aware", field="created_at")

    def is_owned_by(self, user_id: int) -> bool:
        return self.owner_id == user_id


@dataclass(slots=True, frozen=True)
class TodoChanges:
    """Partial update of a todo.

    Only supplied fields are applied. A blank title counts as not supplied.
    """

    title: str | None = None
    completed: bool | None = None

    def apply(self, todo: Todo) -> Todo:
        title = normalize_title(self.title)
        updated = todo
        if title is not None:
            updated = replace(updated, title=title)
        if self.completed is not None:
            updated = replace(updated, completed=self.completed)
        return updated
