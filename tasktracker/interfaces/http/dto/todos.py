from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from tasktracker.domain.todos.entities import Todo, TodoChanges


class CreateTodoRequestDTO(BaseModel):
    title: str | None = Field(default=None, max_length=512)

    model_config = ConfigDict(extra="ignore")


class UpdateTodoRequestDTO(BaseModel):
    title: str | None = Field(default=None, max_length=512)
    completed: StrictBool | None = None

    model_config = ConfigDict(extra="ignore")

    def to_changes(self) -> TodoChanges:
        return TodoChanges(title=self.title, completed=self.completed)


class TodoDTO(BaseModel):
    id: int
    title: str
    completed: bool
    created_at: datetime = Field(serialization_alias="createdAt")

    @classmethod
    def from_entity(cls, todo: Todo) -> TodoDTO:
        return cls(
            id=todo.id,
            title=todo.title,
            completed=todo.completed,
            created_at=todo.created_at,
        )

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
