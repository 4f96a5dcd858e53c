# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from tasktracker.domain.users.entities import User, normalize_username
from tasktracker.domain.users.exceptions import MissingCredentialsError, UserAlreadyExistsError
from tasktracker.domain.users.repositories import PasswordHasher, UserRepository


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> User:
        normalized = normalize_username(username)
        if not normalized or not password or not password.strip():
            raise MissingCredentialsError()
        if self._users.find_by_username(normalized):
            raise UserAlreadyExistsError()
        hashed = self._password_hasher.hash(password)
        return self._users.add(User(id=0, username=normalized, password_hash=hashed))
