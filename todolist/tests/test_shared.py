from __future__ import annotations

from http import HTTPStatus

import pytest
from flask import Flask
from pydantic import BaseModel, StrictStr
from pydantic import ValidationError as PydanticValidationError

from todolist.app import create_app
from todolist.application.services.password_hashing import Argon2PasswordHasher
from todolist.domain.comments.exceptions import CommentNotFoundError
from todolist.interfaces.http.controllers import misc_controller
from todolist.shared.config import load_config
from todolist.shared.config.settings import PasswordConfig
from todolist.shared.errors import AppError, ValidationError
from todolist.shared.errors.validation import format_pydantic_errors, raise_validation_error
from todolist.shared.logging import sanitize_message
from todolist.shared.middleware.csrf import CSRF_COOKIE, CSRF_HEADER
from todolist.shared.middleware.rate_limit import InMemoryRateLimiter
from todolist.shared.middleware.request_logger import REQUEST_ID_HEADER


@pytest.mark.parametrize(
    "message",
    [
        'payload={"currentPassword": "hunter2-secret", "newPassword": "x"}',
        "password=hunter2-secret",
        "hash $argon2id$v=19$m=65536,t=3,p=4$c2FsdA$aGFzaA",
        "Cookie: auth=eyJ1c2VySWQiOjF9.ZxYw.abcdefghijklmnop",
        "db: postgresql+psycopg://todo:hunter2-secret@db/todo",
    ],
)
def test_sanitize_message_masks_credentials(message: str) -> None:
    sanitized = sanitize_message(message)

    assert "hunter2-secret" not in sanitized
    assert "aGFzaA" not in sanitized
    assert "abcdefghijklmnop" not in sanitized
    assert "REDACTED" in sanitized


def test_sanitize_message_keeps_plain_text() -> None:
    assert sanitize_message("auth.login: ok user_id=3") == "auth.login: ok user_id=3"


def test_rate_limiter_window() -> None:
    limiter = InMemoryRateLimiter(limit=2, window_seconds=10)

    assert limiter.allow("1.2.3.4", now=0.0)
    assert limiter.allow("1.2.3.4", now=1.0)
    assert not limiter.allow("1.2.3.4", now=2.0)
    assert limiter.allow("5.6.7.8", now=2.0)
    assert limiter.allow("1.2.3.4", now=10.5)


def test_rate_limiter_forgets_idle_callers() -> None:
    limiter = InMemoryRateLimiter(limit=2, window_seconds=10)
    limiter.allow("a", now=0.0)
    limiter.allow("b", now=1.0)
    assert len(limiter) == 2

    limiter.allow("c", now=12.0)

    assert len(limiter) == 1


def test_domain_error_payload() -> None:
    error = CommentNotFoundError(7)

    assert isinstance(error, AppError)
    assert error.status == HTTPStatus.NOT_FOUND
    assert error.to_dict() == {"error": "comment_not_found", "context": {"comment_id": 7}}


class _Body(BaseModel):
    name: StrictStr


def test_pydantic_errors_become_validation_error() -> None:
    with pytest.raises(PydanticValidationError) as info:
        _Body.model_validate({"name": 5})

    formatted = format_pydantic_errors(info.value)
    assert formatted["fields"] == ["name"]
    assert formatted["errors"][0]["type"] == "string_type"

    with pytest.raises(ValidationError) as raised:
        raise_validation_error(info.value, "Name must be a string")
    assert raised.value.status == HTTPStatus.UNPROCESSABLE_ENTITY
    assert raised.value.to_dict()["detail"] == "Name must be a string"


def test_body_of_wrong_shape_is_reported_as_body() -> None:
    with pytest.raises(PydanticValidationError) as info:
        _Body.model_validate(["not", "an", "object"])

    assert format_pydantic_errors(info.value)["fields"] == ["body"]


def test_validation_error_always_has_detail() -> None:
    assert ValidationError().to_dict()["detail"] == "Request body is invalid"


def test_argon2_hash_with_old_parameters_needs_rehash() -> None:
    old = Argon2PasswordHasher(PasswordConfig(time_cost=1, memory_cost=1024, parallelism=1))
    current = Argon2PasswordHasher(PasswordConfig(time_cost=2, memory_cost=1024, parallelism=1))
    hashed = old.hash("long-enough-password")

    assert current.verify("long-enough-password", hashed)
    assert current.needs_rehash(hashed)
    assert not old.needs_rehash(hashed)


@pytest.fixture()
def app() -> Flask:
    return create_app()


def test_health_reports_unreachable_database(
    app: Flask, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(misc_controller, "database_status", lambda: "error: OperationalError")

    with app.test_client() as client:
        response = client.get("/api/health")

    assert response.status_code == 503
    assert response.get_json() == {"ok": False, "database": "error: OperationalError"}


def test_csrf_token_round_trip(app: Flask, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(load_config().security, "enable_csrf", True)

    with app.test_client() as client:
        rejected = client.post("/logout")
        client.get("/login")
        token = client.get_cookie(CSRF_COOKIE)
        assert token is not None
        accepted = client.post("/logout", headers={CSRF_HEADER: token.value})

    assert rejected.status_code == 403
    assert rejected.get_json() == {"error": "csrf", "detail": "Missing or invalid CSRF token"}
    assert accepted.status_code == 302
    assert accepted.headers["Location"] == "/login"


def test_request_id_is_echoed_or_generated(app: Flask) -> None:
    with app.test_client() as client:
        echoed = client.get("/login", headers={REQUEST_ID_HEADER: "abc123"})
        generated = client.get("/login")

    assert echoed.headers[REQUEST_ID_HEADER] == "abc123"
    assert generated.headers[REQUEST_ID_HEADER]
    assert generated.headers[REQUEST_ID_HEADER] != "abc123"


def test_unexpected_error_has_fixed_body(app: Flask) -> None:
    @app.get("/boom")
    def _boom():
        raise RuntimeError("password=hunter2-secret")

    with app.test_client() as client:
        response = client.get("/boom")

    assert response.status_code == 500
    assert response.get_json() == {"error": "internal_error"}
