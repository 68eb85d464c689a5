# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections import deque
from collections.abc import Callable
from functools import wraps
from threading import Lock
from typing import Any

from flask import g, jsonify, request

from todolist.shared.config import load_config
from todolist.shared.logging import logger

RATE_LIMITED_DETAIL = "Too many attempts, try again later"


class InMemoryRateLimiter:
    """Sliding-window hit counter per key.

    Keys whose window has emptied are forgotten, at the latest one window
    after their last hit.
    """

    def __init__(self, limit: int, window_seconds: float) -> None:
        self.limit = max(1, int(limit))
        self.window = max(0.1, float(window_seconds))
        self._hits: dict[str, deque[float]] = {}
        self._last_sweep = 0.0
        self._lock = Lock()

    def __len__(self) -> int:
        return len(self._hits)

    def allow(self, key: str, now: float | None = None) -> bool:
        now = time.monotonic() if now is None else now
        with self._lock:
            if now - self._last_sweep >= self.window:
                self._sweep(now)
            hits = self._hits.get(key)
            if hits is None:
                hits = self._hits[key] = deque(maxlen=self.limit)
            else:
                self._expire(hits, now)
            if len(hits) >= self.limit:
                return False
            hits.append(now)
            return True

    def clear(self) -> None:
        with self._lock:
            self._hits.clear()

    def _expire(self, hits: deque[float], now: float) -> None:
        while hits and now - hits[0] > self.window:
            hits.popleft()

    def _sweep(self, now: float) -> None:
        for key in list(self._hits):
            hits = self._hits[key]
            self._expire(hits, now)
            if not hits:
                del self._hits[key]
        self._last_sweep = now


def _caller_key() -> str:
    user = getattr(g, "user", None)
    if user is not None:
        return f"{request.endpoint}:user:{user.id}"
    forwarded = request.headers.get("X-Forwarded-For", "").split(",")[0].strip()
    return f"{request.endpoint}:ip:{forwarded or request.remote_addr or 'unknown'}"


def rate_limit(limit: int | None = None, window_seconds: float | None = None):
    """Throttle a view per signed-in user, or per client IP for anonymous callers.

    On guarded views stack it below ``session_required``: anonymous callers
    are then redirected before they are ever counted.
    """
    security = load_config().security
    limiter = InMemoryRateLimiter(
        limit or security.rate_limit_requests,
        window_seconds or security.rate_limit_window,
    )

    def decorator(view: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(view)
        def wrapper(*args, **kwargs):
            if load_config().security.enable_rate_limit and not limiter.allow(_caller_key()):
                logger.warning(f"rate_limit: blocked {request.method} {request.path}")
                return jsonify({"error": "rate_limited", "detail": RATE_LIMITED_DETAIL}), 429
            return view(*args, **kwargs)

        wrapper.limiter = limiter  # type: ignore[attr-defined]
        return wrapper

    return decorator


__all__ = ["InMemoryRateLimiter", "RATE_LIMITED_DETAIL", "rate_limit"]
