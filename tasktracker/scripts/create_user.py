# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Create a user account.

Usage:
  tasktracker-create-user --username alice --password '...'
"""

from __future__ import annotations

import argparse
import sys

from tasktracker.infrastructure.container import Container
from tasktracker.infrastructure.db import init_db
from tasktracker.shared.config import load_config
from tasktracker.shared.errors import AppError
from tasktracker.shared.logging import logger, setup_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a task tracker user")
    parser.add_argument("--username", required=True)
    parser.add_argument("--password", required=True)
    args = parser.parse_args(argv)

    config = load_config()
    setup_logging(level=config.log_level, log_file=config.log_file)

    container = Container(config)
    init_db(container.engine)

    try:
        user = container.register_user_use_case.execute(args.username, args.password)
    except AppError as exc:
        logger.error(f"create_user: failed ({exc.code})")
        print(f"error: {exc.code}", file=sys.stderr)
        return 1

    logger.info(f"create_user: ok user_id={user.id} username={user.username}")
    print(f"Created user {user.username} (id={user.id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
