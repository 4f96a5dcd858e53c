from __future__ import annotations

import pytest

from tasktracker.infrastructure.container import Container
from tasktracker.infrastructure.db import init_db
from tasktracker.infrastructure.seed import seed_dev_user
from tasktracker.scripts import create_user
from tasktracker.shared.config import AppConfig


def test_seed_runs_once(config: AppConfig, container: Container) -> None:
    # create_app already seeded the demo account
    assert container.user_repository.find_by_username("user") is not None

    created = seed_dev_user(
        config,
        users=container.user_repository,
        register=container.register_user_use_case,
    )

    assert created is False


def test_seed_disabled(config: AppConfig) -> None:
    config.seed.enabled = False
    container = Container(config)
    init_db(container.engine)

    created = seed_dev_user(
        config,
        users=container.user_repository,
        register=container.register_user_use_case,
    )

    assert created is False
    assert container.user_repository.find_by_username("user") is None


def test_create_user_command(
    config: AppConfig, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(create_user, "load_config", lambda: config)

    exit_code = create_user.main(["--username", " carol ", "--password", "carol-pass"])

    assert exit_code == 0
    assert "Created user carol" in capsys.readouterr().out
    user = Container(config).user_repository.find_by_username("carol")
    assert user is not None
    assert user.password_hash != "carol-pass"


def test_create_user_command_rejects_duplicates(
    config: AppConfig, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(create_user, "load_config", lambda: config)
    assert create_user.main(["--username", "dave", "--password", "pw-123456"]) == 0

    exit_code = create_user.main(["--username", "dave", "--password", "pw-123456"])

    assert exit_code == 1
    assert "user_already_exists" in capsys.readouterr().err
