# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.orm import Session

from tasktracker.domain.users.entities import User as DomainUser
from tasktracker.domain.users.repositories import UserRepository
from tasktracker.infrastructure.db.models import User
from tasktracker.infrastructure.unit_of_work import unit_of_work_scope


def _to_domain(row: User) -> DomainUser:
    return DomainUser(id=row.id, username=row.username, password_hash=row.password_hash)


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(User).filter(User.username == username).first()
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        with unit_of_work_scope(self._session_factory) as session:
            row = User(username=user.username, password_hash=user.password_hash)
            session.add(row)
            session.flush()
            return _to_domain(row)
