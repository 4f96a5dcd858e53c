# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig


from __future__ import annotations

from time import perf_counter
from typing import TypeVar

from flask import Blueprint, jsonify, request
from pydantic import BaseModel, ValidationError

from tasktracker.application.use_cases.todos import (
    CreateTodoUseCase,
    DeleteTodoUseCase,
    GetTodoUseCase,
    ListTodosUseCase,
    UpdateTodoUseCase,
)
from tasktracker.interfaces.http.dto.todos import (
    CreateTodoRequestDTO,
    TodoDTO,
    UpdateTodoRequestDTO,
)
from tasktracker.interfaces.http.gateway import AuthContext, auth_context_required
from tasktracker.shared.errors import AppError, InfrastructureError
from tasktracker.shared.errors.validation import raise_validation_error
from tasktracker.shared.logging import logger

_DTO = TypeVar("_DTO", bound=BaseModel)


def _parse_body(model: type[_DTO]) -> _DTO:
    try:
        return model.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)


class TodosController:
    def __init__(
        self,
        *,
        list_todos: ListTodosUseCase,
        create_todo: CreateTodoUseCase,
        get_todo: GetTodoUseCase,
        update_todo: UpdateTodoUseCase,
        delete_todo: DeleteTodoUseCase,
    ) -> None:
        self._list_todos = list_todos
        self._create_todo = create_todo
        self._get_todo = get_todo
        self._update_todo = update_todo
        self._delete_todo = delete_todo

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("todos", __name__, url_prefix="/api")
        bp.add_url_rule("/todos", view_func=self.list_todos, methods=["GET"])
        bp.add_url_rule("/todos", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/todos/<int:todo_id>", view_func=self.get, methods=["GET"])
        bp.add_url_rule("/todos/<int:todo_id>", view_func=self.update, methods=["PUT"])
        bp.add_url_rule("/todos/<int:todo_id>", view_func=self.delete, methods=["DELETE"])
        return bp

    @auth_context_required
    def list_todos(self, auth: AuthContext):
        t0 = perf_counter()
        try:
            items = self._list_todos.execute(auth.subject)
        except AppError:
            raise
        except Exception as exc:
            logger.exception(f"todos.list: err (subject={auth.subject})")
            raise InfrastructureError(code="todos_list_failed") from exc

        dt = (perf_counter() - t0) * 1000
        logger.info(f"todos.list: ok (subject={auth.subject}, n={len(items)}, dt_ms={dt:.0f})")
        return jsonify([TodoDTO.from_entity(todo).to_json() for todo in items])

    @auth_context_required
    def create(self, auth: AuthContext):
        dto = _parse_body(CreateTodoRequestDTO)
        try:
            todo = self._create_todo.execute(auth.subject, dto.title)
        except AppError as exc:
            logger.info(f"todos.create: rejected (subject={auth.subject}, code={exc.code})")
            raise
        except Exception as exc:
            logger.exception(f"todos.create: err (subject={auth.subject})")
            raise InfrastructureError(code="todo_create_failed") from exc

        logger.info(f"todos.create: ok (user_id={todo.owner_id}, todo_id={todo.id})")
        return jsonify(TodoDTO.from_entity(todo).to_json()), 201

    @auth_context_required
    def get(self, todo_id: int, auth: AuthContext):
        try:
            todo = self._get_todo.execute(auth.subject, todo_id)
        except AppError as exc:
            logger.info(f"todos.get: {exc.code} (subject={auth.subject}, todo_id={todo_id})")
            raise
        except Exception as exc:
            logger.exception(f"todos.get: err (subject={auth.subject}, todo_id={todo_id})")
            raise InfrastructureError(code="todo_get_failed") from exc

        return jsonify(TodoDTO.from_entity(todo).to_json())

    @auth_context_required
    def update(self, todo_id: int, auth: AuthContext):
        dto = _parse_body(UpdateTodoRequestDTO)
        try:
            todo = self._update_todo.execute(auth.subject, todo_id, dto.to_changes())
        except AppError as exc:
            logger.info(f"todos.update: {exc.code} (subject={auth.subject}, todo_id={todo_id})")
            raise
        except Exception as exc:
            logger.exception(f"todos.update: err (subject={auth.subject}, todo_id={todo_id})")
            raise InfrastructureError(code="todo_update_failed") from exc

        logger.info(f"todos.update: ok (user_id={todo.owner_id}, todo_id={todo.id})")
        return jsonify(TodoDTO.from_entity(todo).to_json())

    @auth_context_required
    def delete(self, todo_id: int, auth: AuthContext):
        try:
            self._delete_todo.execute(auth.subject, todo_id)
        except AppError as exc:
            logger.info(f"todos.delete: {exc.code} (subject={auth.subject}, todo_id={todo_id})")
            raise
        except Exception as exc:
            logger.exception(f"todos.delete: err (subject={auth.subject}, todo_id={todo_id})")
            raise InfrastructureError(code="todo_delete_failed") from exc

        logger.info(f"todos.delete: ok (subject={auth.subject}, todo_id={todo_id})")
        return "", 204
