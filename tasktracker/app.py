# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import os

from flask import Flask
from flask_cors import CORS

from tasktracker.infrastructure.container import Container
from tasktracker.infrastructure.db import init_db
from tasktracker.infrastructure.seed import seed_dev_user
from tasktracker.shared.config import AppConfig, load_config
from tasktracker.shared.logging import logger, setup_logging
from tasktracker.shared.middleware.error_handler import configure_error_handling
from tasktracker.shared.middleware.request_logger import configure_request_logging

CONTAINER_EXTENSION = "tasktracker.container"


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(
        level="DEBUG" if config.debug_logging else config.log_level,
        log_file=config.log_file,
    )

    container = Container(config)
    init_db(container.engine)
    seed_dev_user(
        config,
        users=container.user_repository,
        register=container.register_user_use_case,
    )

    app = Flask(__name__, static_folder=None)
    app.extensions[CONTAINER_EXTENSION] = container

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)
    # after request logging so rejected requests still get a correlation id
    container.auth_gateway.install(app)

    CORS(app, resources={r"/api/*": {"origins": config.security.allowed_origins}})

    # API blueprints first; the SPA catch-all only sees what they do not match
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.todos_controller.as_blueprint())
    app.register_blueprint(container.spa_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp

    logger.info(f"Flask app initialized (env={config.app_env})")
    return app


def main() -> None:
    host = os.environ.get("HOST", "127.0.0.1")
    port = int(os.environ.get("PORT", "8080"))
    app = create_app()
    logger.info(f"Starting task tracker on {host}:{port}")
    app.run(host=host, port=port)


if __name__ == "__main__":
    main()
