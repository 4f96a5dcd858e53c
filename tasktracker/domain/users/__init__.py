# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import User, normalize_username
from .exceptions import InvalidCredentialsError, MissingCredentialsError, UserAlreadyExistsError
from .repositories import PasswordHasher, UserRepository

__all__ = [
    "InvalidCredentialsError",
    "MissingCredentialsError",
    "PasswordHasher",
    "User",
    "UserAlreadyExistsError",
    "UserRepository",
    "normalize_username",
]
