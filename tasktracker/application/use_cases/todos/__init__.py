# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .base import OwnerResolver
from .create_todo import CreateTodoUseCase
from .delete_todo import DeleteTodoUseCase
from .get_todo import GetTodoUseCase
from .list_todos import ListTodosUseCase
from .update_todo import UpdateTodoUseCase

__all__ = [
    "CreateTodoUseCase",
    "DeleteTodoUseCase",
    "GetTodoUseCase",
    "ListTodosUseCase",
    "OwnerResolver",
    "UpdateTodoUseCase",
]
