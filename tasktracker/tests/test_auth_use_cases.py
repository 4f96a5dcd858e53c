from __future__ import annotations

import pytest

from tasktracker.application.services.token_service import TokenService
from tasktracker.application.use_cases.users.login_user import LoginUserUseCase
from tasktracker.application.use_cases.users.register_user import RegisterUserUseCase
from tasktracker.domain.users.exceptions import (
    InvalidCredentialsError,
    MissingCredentialsError,
    UserAlreadyExistsError,
)
from tasktracker.tests.fakes import DeterministicHasher, InMemoryUserRepository

SECRET = "unit-test-secret-0123456789abcdef-0123"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def tokens() -> TokenService:
    return TokenService(secret=SECRET, expiration_ms=60_000)


@pytest.fixture()
def login(users: InMemoryUserRepository, tokens: TokenService) -> LoginUserUseCase:
    RegisterUserUseCase(users=users, password_hasher=DeterministicHasher()).execute(
        "alice", "secret123"
    )
    return LoginUserUseCase(users=users, password_hasher=DeterministicHasher(), tokens=tokens)


def test_register_user_success(users: InMemoryUserRepository) -> None:
    use_case = RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())

    user = use_case.execute("  bob ", "hunter22")

    assert user.id == 1
    assert user.username == "bob"
    assert user.password_hash == "hashed:hunter22"
    assert users.find_by_username("bob") == user


def test_register_duplicate_user_raises(users: InMemoryUserRepository) -> None:
    use_case = RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())
    use_case.execute("bob", "hunter22")

    with pytest.raises(UserAlreadyExistsError):
        use_case.execute("bob", "another")


def test_register_blank_password_raises(users: InMemoryUserRepository) -> None:
    use_case = RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())

    with pytest.raises(MissingCredentialsError):
        use_case.execute("bob", "   ")


def test_login_returns_token_for_subject(login: LoginUserUseCase, tokens: TokenService) -> None:
    result = login.execute("alice", "secret123")

    assert result.username == "alice"
    assert tokens.verify(result.token) == "alice"


def test_login_trims_username(login: LoginUserUseCase) -> None:
    result = login.execute("  alice  ", "secret123")

    assert result.username == "alice"


def test_unknown_user_and_wrong_password_are_indistinguishable(login: LoginUserUseCase) -> None:
    with pytest.raises(InvalidCredentialsError) as unknown:
        login.execute("mallory", "secret123")
    with pytest.raises(InvalidCredentialsError) as wrong:
        login.execute("alice", "wrong-password")

    assert unknown.value.to_dict() == wrong.value.to_dict()
    assert unknown.value.status == wrong.value.status == 401


@pytest.mark.parametrize(
    ("username", "password"),
    [(None, "secret123"), ("alice", None), ("", "secret123"), ("alice", ""), ("   ", "x")],
)
def test_login_missing_fields_raise(
    login: LoginUserUseCase, username: str | None, password: str | None
) -> None:
    with pytest.raises(MissingCredentialsError) as excinfo:
        login.execute(username, password)

    assert excinfo.value.status == 400
