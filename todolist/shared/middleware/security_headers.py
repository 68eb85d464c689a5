# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response

from todolist.shared.config.settings import SecurityConfig

BASE_HEADERS: dict[str, str] = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    # every answer depends on the session cookie
    "Cache-Control": "no-store",
}
HSTS_VALUE = "max-age=31536000; includeSubDomains"


def configure_security_headers(app: Flask, security: SecurityConfig) -> None:
    headers = dict(BASE_HEADERS)
    if security.enable_hsts:
        headers["Strict-Transport-Security"] = HSTS_VALUE

    @app.after_request
    def _apply(resp: Response) -> Response:
        for name, value in headers.items():
            resp.headers.setdefault(name, value)
        return resp


__all__ = ["BASE_HEADERS", "configure_security_headers"]
