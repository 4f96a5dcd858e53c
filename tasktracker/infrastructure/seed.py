# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from tasktracker.application.use_cases.users.register_user import RegisterUserUseCase
from tasktracker.domain.users.repositories import UserRepository
from tasktracker.shared.config import AppConfig
from tasktracker.shared.logging import logger


def seed_dev_user(
    config: AppConfig, *, users: UserRepository, register: RegisterUserUseCase
) -> bool:
    """Create the demo account once, outside production. Returns True if created."""
    if not config.should_seed():
        logger.debug("seed: demo account disabled")
        return False

    username = config.seed.username
    if users.find_by_username(username) is not None:
        logger.debug(f"seed: user '{username}' already present")
        return False

    user = register.execute(username, config.seed.password)
    logger.info(f"seed: created demo account user_id={user.id} username={user.username}")
    return True


__all__ = ["seed_dev_user"]
