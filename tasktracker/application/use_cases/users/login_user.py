# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from tasktracker.application.services.token_service import TokenService
from tasktracker.domain.users.entities import normalize_username
from tasktracker.domain.users.exceptions import InvalidCredentialsError, MissingCredentialsError
from tasktracker.domain.users.repositories import PasswordHasher, UserRepository


@dataclass(slots=True, frozen=True)
class LoginResult:
    token: str
    username: str


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._tokens = tokens

    def execute(self, username: str | None, password: str | None) -> LoginResult:
        normalized = normalize_username(username)
        if not normalized or not password or not password.strip():
            raise MissingCredentialsError()

        user = self._users.find_by_username(normalized)
        # unknown user and wrong password must look the same to the caller
        if user is None or not self._password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        return LoginResult(token=self._tokens.issue(user.username), username=user.username)
