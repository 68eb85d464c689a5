# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Double-submit CSRF token.

Safe requests hand out a random ``csrf_token`` cookie readable by the page;
state-changing views wrapped in ``csrf_protect`` require the same value back
in the ``X-CSRF-Token`` header.
"""

from __future__ import annotations

import secrets
from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import Flask, Response, jsonify, request

from todolist.shared.config import load_config
from todolist.shared.config.settings import SecurityConfig
from todolist.shared.logging import logger

CSRF_COOKIE = "csrf_token"
CSRF_HEADER = "X-CSRF-Token"
CSRF_DETAIL = "Missing or invalid CSRF token"
_STATE_CHANGING = frozenset({"POST", "PUT", "PATCH", "DELETE"})


def _security() -> SecurityConfig:
    return load_config().security


def _token_matches() -> bool:
    sent = request.headers.get(CSRF_HEADER, "").strip().encode()
    expected = request.cookies.get(CSRF_COOKIE, "").strip().encode()
    return bool(sent) and secrets.compare_digest(sent, expected)


def configure_csrf(app: Flask) -> None:
    @app.after_request
    def _hand_out_token(resp: Response) -> Response:
        security = _security()
        if (
            security.enable_csrf
            and request.method not in _STATE_CHANGING
            and CSRF_COOKIE not in request.cookies
        ):
            resp.set_cookie(
                CSRF_COOKIE,
                secrets.token_urlsafe(32),
                max_age=security.session_max_age,
                path="/",
                secure=security.cookie_secure,
                httponly=False,
                samesite=security.cookie_samesite,
            )
        return resp


def csrf_protect(view: Callable[..., Any]) -> Callable[..., Any]:
    @wraps(view)
    def wrapper(*args, **kwargs):
        if (
            request.method in _STATE_CHANGING
            and _security().enable_csrf
            and not _token_matches()
        ):
            logger.warning(f"csrf: rejected {request.method} {request.path}")
            return jsonify({"error": "csrf", "detail": CSRF_DETAIL}), 403
        return view(*args, **kwargs)

    return wrapper


__all__ = ["CSRF_COOKIE", "CSRF_HEADER", "configure_csrf", "csrf_protect"]
