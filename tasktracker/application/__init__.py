# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services import TokenService, WerkzeugPasswordHasher
from .use_cases.todos import (
    CreateTodoUseCase,
    DeleteTodoUseCase,
    GetTodoUseCase,
    ListTodosUseCase,
    OwnerResolver,
    UpdateTodoUseCase,
)
from .use_cases.users.login_user import LoginResult, LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase

__all__ = [
    "CreateTodoUseCase",
    "DeleteTodoUseCase",
    "GetTodoUseCase",
    "ListTodosUseCase",
    "LoginResult",
    "LoginUserUseCase",
    "OwnerResolver",
    "RegisterUserUseCase",
    "TokenService",
    "UpdateTodoUseCase",
    "WerkzeugPasswordHasher",
]
