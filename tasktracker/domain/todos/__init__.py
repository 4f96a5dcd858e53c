# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Todo, TodoChanges, normalize_title
from .exceptions import TitleRequiredError, TodoNotFoundError, UnknownOwnerError
from .repositories import TodoRepository

__all__ = [
    "TitleRequiredError",
    "Todo",
    "TodoChanges",
    "TodoNotFoundError",
    "TodoRepository",
    "UnknownOwnerError",
    "normalize_title",
]
