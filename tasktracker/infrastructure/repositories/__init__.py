# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .todos import SqlAlchemyTodoRepository
from .users import SqlAlchemyUserRepository

__all__ = ["SqlAlchemyTodoRepository", "SqlAlchemyUserRepository"]
