from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from tasktracker.app import CONTAINER_EXTENSION, create_app
from tasktracker.infrastructure.container import Container
from tasktracker.shared.config.settings import (
    AppConfig,
    DatabaseConfig,
    JwtConfig,
    SeedConfig,
    StaticConfig,
)

TEST_SECRET = "test-secret-0123456789abcdef-0123456789"
INDEX_HTML = "<!doctype html><html><body>task tracker</body></html>"
APP_JS = "console.log('bundle');"


@pytest.fixture()
def static_dir(tmp_path: Path) -> Path:
    root = tmp_path / "static"
    (root / "assets").mkdir(parents=True)
    (root / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (root / "assets" / "app.js").write_text(APP_JS, encoding="utf-8")
    return root


@pytest.fixture()
def config(tmp_path: Path, static_dir: Path) -> AppConfig:
    return AppConfig(
        APP_ENV="test",
        database=DatabaseConfig(DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}"),
        jwt=JwtConfig(JWT_SECRET=TEST_SECRET, JWT_EXPIRATION_MS=60_000),
        static=StaticConfig(STATIC_DIR=static_dir),
        seed=SeedConfig(SEED_DEV_USER=True, SEED_USERNAME="user", SEED_PASSWORD="password"),
    )


@pytest.fixture()
def app(config: AppConfig) -> Flask:
    return create_app(config)


@pytest.fixture()
def container(app: Flask) -> Container:
    return app.extensions[CONTAINER_EXTENSION]


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def login(client: FlaskClient) -> Callable[[str, str], str]:
    def _login(username: str = "user", password: str = "password") -> str:
        response = client.post(
            "/api/auth/login", json={"username": username, "password": password}
        )
        assert response.status_code == 200, response.get_json()
        return response.get_json()["token"]

    return _login


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
