# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Shared plumbing for the todo use cases.

Tokens carry a username rather than a stable id, so every operation first
maps the authenticated subject back to a user id through the user store.
"""

from __future__ import annotations

from tasktracker.domain.users.repositories import UserRepository
from tasktracker.shared.errors import UnauthorizedError


class OwnerResolver:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def resolve(self, subject: str | None) -> int | None:
        if not subject:
            return None
        user = self._users.find_by_username(subject)
        return user.id if user else None

    def require(self, subject: str | None) -> int:
        owner_id = self.resolve(subject)
        if owner_id is None:
            raise UnauthorizedError("unknown_user")
        return owner_id
