# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import g, redirect, request

from todolist.shared.logging import logger

LOGIN_PATH = "/login"
HOME_PATH = "/"


def client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


def session_required(view: Callable[..., Any]) -> Callable[..., Any]:
    """Run a controller view only for a signed-in user.

    The controller must expose its ``SessionGuard`` as ``self._guard``. The
    user is published on ``flask.g.user``; anyone else is sent to the login
    page rather than given an error.
    """

    @wraps(view)
    def inner(self, *args, **kwargs):
        user = self._guard.resolve(request.headers.get("Cookie"))
        if user is None:
            logger.info(f"auth.guard: redirecting anonymous {request.method} {request.path}")
            return redirect(LOGIN_PATH)
        g.user = user
        return view(self, *args, **kwargs)

    return inner


__all__ = ["HOME_PATH", "LOGIN_PATH", "client_ip", "session_required"]
