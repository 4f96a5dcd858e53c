from __future__ import annotations

from datetime import UTC, datetime

import pytest

from tasktracker.domain.exceptions import InvariantViolation
from tasktracker.domain.todos.entities import Todo, TodoChanges, normalize_title
from tasktracker.domain.users.entities import normalize_username


def _todo(**overrides: object) -> Todo:
    fields: dict[str, object] = {
        "id": 1,
        "owner_id": 7,
        "title": "Buy milk",
        "completed": False,
        "created_at": datetime(2025, 3, 1, tzinfo=UTC),
    }
    fields.update(overrides)
    return Todo(**fields)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, None), ("", None), ("   ", None), (" Buy milk ", "Buy milk"), ("x", "x")],
)
def test_normalize_title(raw: str | None, expected: str | None) -> None:
    assert normalize_title(raw) == expected


def test_normalize_username_strips_whitespace() -> None:
    assert normalize_username("  alice\t") == "alice"
    assert normalize_username(None) == ""


@pytest.mark.parametrize("title", ["", " padded "])
def test_todo_rejects_untrimmed_title(title: str) -> None:
    with pytest.raises(InvariantViolation):
        _todo(title=title)


def test_todo_rejects_naive_timestamp() -> None:
    with pytest.raises(InvariantViolation) as excinfo:
        _todo(created_at=datetime(2025, 3, 1))

    assert excinfo.value.field == "created_at"
    assert str(excinfo.value).startswith("created_at: ")


def test_todo_ownership() -> None:
    todo = _todo()

    assert todo.is_owned_by(7)
    assert not todo.is_owned_by(8)


def test_empty_changes_leave_todo_untouched() -> None:
    todo = _todo()

    assert TodoChanges().apply(todo) == todo


def test_changes_apply_title_and_completion() -> None:
    updated = TodoChanges(title=" Walk dog ", completed=True).apply(_todo())

    assert updated.title == "Walk dog"
    assert updated.completed is True
    assert updated.id == 1
    assert updated.owner_id == 7
