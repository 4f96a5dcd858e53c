from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from flask.testing import FlaskClient

from tasktracker.application.services.token_service import TokenService
from tasktracker.infrastructure.container import Container
from tasktracker.tests.conftest import TEST_SECRET, bearer

Login = Callable[..., str]


def _create(client: FlaskClient, token: str, title: str) -> dict:
    response = client.post("/api/todos", json={"title": title}, headers=bearer(token))
    assert response.status_code == 201, response.get_json()
    return response.get_json()


def test_login_create_and_list_flow(client: FlaskClient, login: Login) -> None:
    login_response = client.post(
        "/api/auth/login", json={"username": "user", "password": "password"}
    )
    assert login_response.status_code == 200
    body = login_response.get_json()
    assert body["username"] == "user"
    token = body["token"]

    created = _create(client, token, "Buy milk")
    assert created["title"] == "Buy milk"
    assert created["completed"] is False
    assert isinstance(created["id"], int)
    assert "createdAt" in created

    listed = client.get("/api/todos", headers=bearer(token))
    assert listed.status_code == 200
    assert listed.get_json()[0] == created


def test_created_todo_round_trips(client: FlaskClient, login: Login) -> None:
    token = login()
    before = datetime.now(UTC) - timedelta(seconds=1)

    created = _create(client, token, "  Walk the dog  ")
    fetched = client.get(f"/api/todos/{created['id']}", headers=bearer(token))

    assert fetched.status_code == 200
    assert fetched.get_json() == created
    assert created["title"] == "Walk the dog"
    created_at = datetime.fromisoformat(created["createdAt"])
    assert before <= created_at <= datetime.now(UTC) + timedelta(seconds=1)


def test_list_is_newest_first(client: FlaskClient, login: Login) -> None:
    token = login()
    ids = [_create(client, token, f"todo {n}")["id"] for n in range(3)]

    listed = client.get("/api/todos", headers=bearer(token)).get_json()

    assert [item["id"] for item in listed] == list(reversed(ids))


def test_requests_without_token_are_rejected(client: FlaskClient, login: Login) -> None:
    token = login()
    created = _create(client, token, "secret plans")

    for method, path in [
        ("GET", "/api/todos"),
        ("POST", "/api/todos"),
        ("GET", f"/api/todos/{created['id']}"),
        ("PUT", f"/api/todos/{created['id']}"),
        ("DELETE", f"/api/todos/{created['id']}"),
    ]:
        response = client.open(path, method=method, json={"title": "x"})
        assert response.status_code == 401, (method, path)
        assert response.get_json() == {"error": "missing_token"}
        assert response.headers["WWW-Authenticate"] == "Bearer"

    still_there = client.get(f"/api/todos/{created['id']}", headers=bearer(token))
    assert still_there.get_json()["title"] == "secret plans"


def test_garbage_token_is_rejected(client: FlaskClient) -> None:
    response = client.get("/api/todos", headers=bearer("not.a.jwt"))

    assert response.status_code == 401
    assert response.get_json() == {"error": "token_invalid"}


def test_expired_token_is_rejected(client: FlaskClient) -> None:
    issued_long_ago = TokenService(
        secret=TEST_SECRET,
        expiration_ms=60_000,
        clock=lambda: datetime.now(UTC) - timedelta(hours=2),
    )

    response = client.get("/api/todos", headers=bearer(issued_long_ago.issue("user")))

    assert response.status_code == 401
    assert response.get_json() == {"error": "token_expired"}


def test_login_failures(client: FlaskClient) -> None:
    blank = client.post("/api/auth/login", json={"username": "  ", "password": "password"})
    missing = client.post("/api/auth/login", json={"username": "user"})
    unknown = client.post("/api/auth/login", json={"username": "nobody", "password": "password"})
    wrong = client.post("/api/auth/login", json={"username": "user", "password": "nope"})

    assert blank.status_code == missing.status_code == 400
    assert unknown.status_code == wrong.status_code == 401
    assert unknown.get_json() == wrong.get_json() == {"error": "invalid_credentials"}


def test_todos_are_private_to_their_owner(
    client: FlaskClient, login: Login, container: Container
) -> None:
    container.register_user_use_case.execute("bob", "bob-password")
    alice_token = login()
    bob_token = login("bob", "bob-password")
    todo = _create(client, alice_token, "alice only")
    path = f"/api/todos/{todo['id']}"

    assert client.get("/api/todos", headers=bearer(bob_token)).get_json() == []
    assert client.get(path, headers=bearer(bob_token)).status_code == 404
    assert (
        client.put(path, json={"completed": True}, headers=bearer(bob_token)).status_code == 404
    )
    assert client.delete(path, headers=bearer(bob_token)).status_code == 404

    unchanged = client.get(path, headers=bearer(alice_token)).get_json()
    assert unchanged == todo


def test_not_found_and_not_owned_look_the_same(
    client: FlaskClient, login: Login, container: Container
) -> None:
    container.register_user_use_case.execute("bob", "bob-password")
    alice_token = login()
    bob_token = login("bob", "bob-password")
    todo = _create(client, alice_token, "alice only")

    not_owned = client.get(f"/api/todos/{todo['id']}", headers=bearer(bob_token))
    missing = client.get("/api/todos/424242", headers=bearer(bob_token))

    assert not_owned.status_code == missing.status_code == 404
    assert not_owned.get_json()["error"] == missing.get_json()["error"] == "todo_not_found"


def test_partial_update(client: FlaskClient, login: Login) -> None:
    token = login()
    todo = _create(client, token, "Buy milk")
    path = f"/api/todos/{todo['id']}"

    completed = client.put(path, json={"completed": True}, headers=bearer(token)).get_json()
    assert completed["title"] == "Buy milk"
    assert completed["completed"] is True

    blank_title = client.put(path, json={"title": "   "}, headers=bearer(token)).get_json()
    assert blank_title["title"] == "Buy milk"

    renamed = client.put(path, json={"title": "Buy bread"}, headers=bearer(token)).get_json()
    assert renamed["title"] == "Buy bread"
    assert renamed["completed"] is True
    assert renamed["createdAt"] == todo["createdAt"]


def test_update_rejects_non_boolean_completed(client: FlaskClient, login: Login) -> None:
    token = login()
    todo = _create(client, token, "Buy milk")

    response = client.put(
        f"/api/todos/{todo['id']}", json={"completed": "yes"}, headers=bearer(token)
    )

    assert response.status_code == 400
    assert response.get_json()["error"] == "validation_error"


def test_create_requires_title(client: FlaskClient, login: Login) -> None:
    token = login()

    for payload in ({}, {"title": ""}, {"title": "   "}):
        response = client.post("/api/todos", json=payload, headers=bearer(token))
        assert response.status_code == 400
        assert response.get_json() == {"error": "title_required"}


def test_delete_twice(client: FlaskClient, login: Login) -> None:
    token = login()
    todo = _create(client, token, "Buy milk")
    path = f"/api/todos/{todo['id']}"

    first = client.delete(path, headers=bearer(token))
    second = client.delete(path, headers=bearer(token))

    assert first.status_code == 204
    assert first.data == b""
    assert second.status_code == 404
    assert client.get(path, headers=bearer(token)).status_code == 404


def test_token_for_unknown_user(client: FlaskClient, container: Container) -> None:
    token = container.token_service.issue("ghost")

    assert client.get("/api/todos", headers=bearer(token)).get_json() == []
    assert client.post("/api/todos", json={"title": "x"}, headers=bearer(token)).status_code == 400
    assert client.get("/api/todos/1", headers=bearer(token)).status_code == 401
    assert (
        client.put("/api/todos/1", json={"completed": True}, headers=bearer(token)).status_code
        == 401
    )
    assert client.delete("/api/todos/1", headers=bearer(token)).status_code == 401


def test_unknown_api_path_is_json_404(client: FlaskClient, login: Login) -> None:
    token = login()

    anonymous = client.get("/api/nothing-here")
    authenticated = client.get("/api/nothing-here", headers=bearer(token))

    assert anonymous.status_code == 401
    assert authenticated.status_code == 404
    assert authenticated.is_json
    assert authenticated.get_json()["error"] == "not_found"


def test_wrong_method_on_api_route_is_405(client: FlaskClient, login: Login) -> None:
    token = login()

    response = client.patch("/api/todos", headers=bearer(token))

    assert response.status_code == 405
    assert response.get_json() == {"error": "method_not_allowed"}


def test_security_headers_are_set(client: FlaskClient, login: Login) -> None:
    token = login()

    response = client.get("/api/todos", headers=bearer(token))

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert "Strict-Transport-Security" not in response.headers


def test_long_password_can_log_in(client: FlaskClient, container: Container) -> None:
    password = "p" * 200
    container.register_user_use_case.execute("longpw", password)

    response = client.post("/api/auth/login", json={"username": "longpw", "password": password})

    assert response.status_code == 200
    assert response.get_json()["username"] == "longpw"


def test_ids_beyond_storage_range_are_not_found(client: FlaskClient, login: Login) -> None:
    token = login()
    path = "/api/todos/99999999999999999999"

    assert client.get(path, headers=bearer(token)).status_code == 404
    assert client.put(path, json={"completed": True}, headers=bearer(token)).status_code == 404
    assert client.delete(path, headers=bearer(token)).status_code == 404
