# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from todolist.infrastructure.db import ENGINE
from todolist.shared.logging import logger

DATABASE_OK = "ok"


def database_status() -> str:
    """``"ok"`` when the database answers a trivial query, else ``"error: <class>"``."""
    try:
        with ENGINE.connect() as connection:
            connection.scalar(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning(f"health: database unreachable ({type(exc).__name__})")
        return f"error: {type(exc).__name__}"
    return DATABASE_OK


__all__ = ["DATABASE_OK", "database_status"]
