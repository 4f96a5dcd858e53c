# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from tasktracker.application.services.password_hashing import WerkzeugPasswordHasher
from tasktracker.application.services.token_service import TokenService
from tasktracker.application.use_cases.todos import (
    CreateTodoUseCase,
    DeleteTodoUseCase,
    GetTodoUseCase,
    ListTodosUseCase,
    OwnerResolver,
    UpdateTodoUseCase,
)
from tasktracker.application.use_cases.users.login_user import LoginUserUseCase
from tasktracker.application.use_cases.users.register_user import RegisterUserUseCase
from tasktracker.infrastructure.db import build_engine, build_session_factory
from tasktracker.infrastructure.repositories import (
    SqlAlchemyTodoRepository,
    SqlAlchemyUserRepository,
)
from tasktracker.interfaces.http.controllers import (
    AuthController,
    SpaController,
    TodosController,
)
from tasktracker.interfaces.http.gateway import AuthGateway
from tasktracker.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    # Persistence

    @cached_property
    def engine(self) -> Engine:
        return build_engine(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return build_session_factory(self.engine)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def todo_repository(self) -> SqlAlchemyTodoRepository:
        return SqlAlchemyTodoRepository(self.session_factory)

    # Security

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_service(self) -> TokenService:
        return TokenService(
            secret=self.config.jwt.secret,
            expiration_ms=self.config.jwt.expiration_ms,
        )

    @cached_property
    def auth_gateway(self) -> AuthGateway:
        return AuthGateway(tokens=self.token_service)

    # Use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            tokens=self.token_service,
        )

    @cached_property
    def owner_resolver(self) -> OwnerResolver:
        return OwnerResolver(users=self.user_repository)

    @cached_property
    def list_todos_use_case(self) -> ListTodosUseCase:
        return ListTodosUseCase(owners=self.owner_resolver, todos=self.todo_repository)

    @cached_property
    def create_todo_use_case(self) -> CreateTodoUseCase:
        return CreateTodoUseCase(owners=self.owner_resolver, todos=self.todo_repository)

    @cached_property
    def get_todo_use_case(self) -> GetTodoUseCase:
        return GetTodoUseCase(owners=self.owner_resolver, todos=self.todo_repository)

    @cached_property
    def update_todo_use_case(self) -> UpdateTodoUseCase:
        return UpdateTodoUseCase(owners=self.owner_resolver, todos=self.todo_repository)

    @cached_property
    def delete_todo_use_case(self) -> DeleteTodoUseCase:
        return DeleteTodoUseCase(owners=self.owner_resolver, todos=self.todo_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(login_use_case=self.login_user_use_case)

    @cached_property
    def todos_controller(self) -> TodosController:
        return TodosController(
            list_todos=self.list_todos_use_case,
            create_todo=self.create_todo_use_case,
            get_todo=self.get_todo_use_case,
            update_todo=self.update_todo_use_case,
            delete_todo=self.delete_todo_use_case,
        )

    @cached_property
    def spa_controller(self) -> SpaController:
        return SpaController(config=self.config.static)
