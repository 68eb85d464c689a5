# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""loguru setup for the todo-list backend.

Every record carries the request's correlation id and passes through the
credential masking patcher before any sink sees it.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path

from loguru import logger as _logger

from todolist.shared.config import AppConfig, load_config

from .sensitive_filter import sanitize_record

_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | "
    "req={extra[correlation_id]} | {name}:{line} | {message}"
)

# stdlib loggers of the libraries the app runs on
_FORWARDED = {"werkzeug": logging.INFO, "sqlalchemy": logging.WARNING}

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="-")


class _ForwardToLoguru(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        _logger.bind(correlation_id=_correlation_id.get()).opt(
            depth=6, exception=record.exc_info
        ).log(level, record.getMessage())


class _CorrelatedLogger:
    """loguru facade stamping each call with the current correlation id."""

    def __getattr__(self, name: str):
        return getattr(_logger.bind(correlation_id=_correlation_id.get()), name)


def set_correlation_id(value: str | None) -> None:
    _correlation_id.set(value or "-")


def clear_correlation_id() -> None:
    _correlation_id.set("-")


def setup_logging(config: AppConfig | None = None) -> None:
    config = config or load_config()
    level = (config.logging.level or ("DEBUG" if config.debug_logging else "INFO")).upper()

    _logger.remove()
    _logger.configure(extra={"correlation_id": "-"}, patcher=sanitize_record)
    _logger.add(sys.stderr, level=level, format=_FORMAT, backtrace=False, diagnose=False)

    if config.logging.file:
        log_file = Path(config.logging.file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _logger.add(
            log_file,
            level=level,
            format=_FORMAT,
            backtrace=False,
            diagnose=False,
            encoding="utf-8",
        )

    for name, floor in _FORWARDED.items():
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers = [_ForwardToLoguru()]
        stdlib_logger.setLevel(floor)
        stdlib_logger.propagate = False


logger = _CorrelatedLogger()

__all__ = ["clear_correlation_id", "logger", "set_correlation_id", "setup_logging"]
