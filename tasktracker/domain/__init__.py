# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import InvariantViolation
from .todos import Todo, TodoChanges
from .users import User

__all__ = [
    "InvariantViolation",
    "Todo",
    "TodoChanges",
    "User",
]
