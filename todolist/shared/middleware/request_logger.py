# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Access log: one line per request, tagged with a correlation id.

The id comes from ``X-Request-ID`` when the caller sends one and is echoed
back on the response. With ``DEBUG_LOGGING`` the headers are logged too,
credentials replaced by a short fingerprint.
"""

from __future__ import annotations

import hashlib
import secrets
import time

from flask import Flask, Response, g, request

from todolist.shared.config import load_config
from todolist.shared.logging import clear_correlation_id, logger, set_correlation_id

REQUEST_ID_HEADER = "X-Request-ID"
_MASKED_HEADERS = frozenset({"authorization", "cookie", "x-csrf-token"})


def _fingerprint(value: str) -> str:
    return "sha256:" + hashlib.sha256(value.encode()).hexdigest()[:8]


def _visible_headers() -> dict[str, str]:
    return {
        name: _fingerprint(value) if name.lower() in _MASKED_HEADERS else value
        for name, value in request.headers.items()
    }


def _peer() -> str:
    forwarded = request.headers.get("X-Forwarded-For", "")
    return forwarded.split(",")[0].strip() or request.remote_addr or "unknown"


def configure_request_logging(app: Flask) -> None:
    verbose = load_config().debug_logging

    @app.before_request
    def _start() -> None:
        g.request_id = request.headers.get(REQUEST_ID_HEADER) or secrets.token_hex(6)
        g.started_at = time.perf_counter()
        set_correlation_id(g.request_id)
        if verbose:
            logger.debug(f"http.in: {request.method} {request.full_path} headers={_visible_headers()}")

    @app.after_request
    def _finish(response: Response) -> Response:
        elapsed_ms = (time.perf_counter() - g.get("started_at", time.perf_counter())) * 1000
        user_id = getattr(g.get("user"), "id", None)
        logger.info(
            f"http: {request.method} {request.path} {response.status_code} "
            f"{elapsed_ms:.1f}ms peer={_peer()} user={user_id}"
        )
        if "request_id" in g:
            response.headers.setdefault(REQUEST_ID_HEADER, g.request_id)
        return response

    @app.teardown_request
    def _reset(exc: BaseException | None) -> None:
        clear_correlation_id()


__all__ = ["REQUEST_ID_HEADER", "configure_request_logging"]
