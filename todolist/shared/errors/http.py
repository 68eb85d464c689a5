# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from todolist.shared.config import load_config
from todolist.shared.logging import logger

from .base import AppError

INTERNAL_ERROR_BODY = {"error": "internal_error"}


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    return jsonify(error.to_dict()), error.status


def _where() -> str:
    user_id = getattr(getattr(g, "user", None), "id", None)
    return f"{request.method} {request.path} user={user_id}"


def register_error_handler(app: Flask) -> None:
    """JSON bodies for ``AppError``; a fixed 500 body for anything unexpected.

    werkzeug's own HTTP errors (404, 405, ...) are passed through untouched.
    """
    verbose = load_config().debug_logging

    @app.errorhandler(AppError)
    def _app_error(exc: AppError):
        logger.info(f"http.error: {exc.code} {int(exc.status)} on {_where()}")
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _http_exception(exc: HTTPException):
        return exc

    @app.errorhandler(Exception)
    def _unexpected(exc: Exception):
        if verbose:
            logger.opt(exception=exc).error(f"http.error: unhandled on {_where()}")
        else:
            logger.error(f"http.error: unhandled {type(exc).__name__} on {_where()}")
        return jsonify(INTERNAL_ERROR_BODY), HTTPStatus.INTERNAL_SERVER_ERROR


__all__ = ["INTERNAL_ERROR_BODY", "handle_app_error", "register_error_handler"]
