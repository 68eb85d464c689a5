from __future__ import annotations

from datetime import UTC, datetime
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from todolist.application.services.session_guard import SessionGuard
from todolist.application.use_cases.users.login_user import LoginUserUseCase
from todolist.domain.users.entities import User
from todolist.domain.users.exceptions import InvalidCredentialsError
from todolist.infrastructure.auth.session_cookie import SignedSessionCookie
from todolist.interfaces.http.controllers.auth_controller import AuthController
from todolist.shared.config.settings import SecurityConfig
from todolist.shared.errors import register_error_handler

ALICE = User(id=1, username="alice", password_hash="hash", created_at=datetime.now(UTC))


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    register_error_handler(app)
    return app


@pytest.fixture()
def cookies() -> SignedSessionCookie:
    return SignedSessionCookie("secret", SecurityConfig(session_cookie_name="auth"))


def _guard(user: User | None) -> SessionGuard:
    guard = MagicMock()
    guard.resolve.return_value = user
    return cast(SessionGuard, guard)


def test_login_sets_session_cookie(flask_app: Flask, cookies: SignedSessionCookie) -> None:
    login_called: dict[str, tuple[str, str]] = {}

    class StubLogin:
        def execute(self, username: str, password: str) -> User:
            login_called["args"] = (username, password)
            return ALICE

    controller = AuthController(
        login_use_case=cast(LoginUserUseCase, StubLogin()),
        guard=_guard(None),
        cookies=cookies,
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", json={"username": "alice", "password": "secret123"})

    assert response.status_code == 302
    assert response.headers["Location"] == "/"
    assert login_called["args"] == ("alice", "secret123")
    payload = cookies.parse(response.headers["Set-Cookie"].split(";", 1)[0])
    assert payload is not None and payload.user_id == ALICE.id


def test_login_with_bad_credentials_returns_detail(
    flask_app: Flask, cookies: SignedSessionCookie
) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    controller = AuthController(login_use_case=login, guard=_guard(None), cookies=cookies)
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", json={"username": "alice", "password": "nope"})

    assert response.status_code == 400
    assert response.get_json() == {
        "error": "invalid_credentials",
        "detail": "Invalid username or password",
    }
    assert "Set-Cookie" not in response.headers


def test_login_invalid_payload_returns_422(flask_app: Flask, cookies: SignedSessionCookie) -> None:
    controller = AuthController(login_use_case=MagicMock(), guard=_guard(None), cookies=cookies)
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", json={"username": "a"})

    assert response.status_code == 422
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert payload["detail"] == "Username and password must be non-empty strings"
    assert payload["context"]["fields"] == ["password"]


def test_login_page_sends_signed_in_user_home(
    flask_app: Flask, cookies: SignedSessionCookie
) -> None:
    controller = AuthController(login_use_case=MagicMock(), guard=_guard(ALICE), cookies=cookies)
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.get("/login")

    assert response.status_code == 302
    assert response.headers["Location"] == "/"


def test_logout_clears_cookie(flask_app: Flask, cookies: SignedSessionCookie) -> None:
    controller = AuthController(login_use_case=MagicMock(), guard=_guard(ALICE), cookies=cookies)
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/logout")

    assert response.status_code == 302
    assert response.headers["Location"] == "/login"
    assert "Max-Age=0" in response.headers["Set-Cookie"]
