# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Security audit trail: one log line and one ``audit_logs`` row per event."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from todolist.infrastructure.db import session_scope
from todolist.infrastructure.db.models import AuditLog
from todolist.shared.logging import logger


class AuditAction(str, Enum):
    LOGIN_SUCCESS = "login_success"
    LOGIN_FAILED = "login_failed"
    LOGOUT = "logout"
    USER_CREATED = "user_created"
    PASSWORD_CHANGED = "password_changed"
    PASSWORD_CHANGE_FAILED = "password_change_failed"
    COMMENT_UPDATED = "comment_updated"


_REDACTED_KEYS = ("password", "token", "cookie", "secret", "hash")


def _redact(details: Mapping[str, Any]) -> dict[str, Any]:
    return {
        key: "***" if any(marker in key.lower() for marker in _REDACTED_KEYS) else value
        for key, value in details.items()
    }


@dataclass(frozen=True, slots=True)
class AuditEvent:
    action: AuditAction
    user_id: int | None = None
    ip_address: str | None = None
    success: bool = True
    details: dict[str, Any] = field(default_factory=dict)
    at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def describe(self) -> str:
        outcome = "ok" if self.success else "failed"
        line = f"audit {self.action.value} {outcome} user={self.user_id} ip={self.ip_address}"
        if self.details:
            line += f" {json.dumps(self.details, default=str, sort_keys=True)}"
        return line


def _persist(event: AuditEvent) -> None:
    try:
        with session_scope() as session:
            session.add(
                AuditLog(
                    timestamp=event.at,
                    action=event.action.value,
                    user_id=event.user_id,
                    ip_address=event.ip_address,
                    success=event.success,
                    details_json=json.dumps(event.details, default=str) if event.details else None,
                )
            )
    except SQLAlchemyError as exc:
        # the log line is then the only record of the event
        logger.warning(f"audit: could not store {event.action.value} ({type(exc).__name__})")


def audit_log(
    action: AuditAction,
    user_id: int | None = None,
    ip_address: str | None = None,
    details: Mapping[str, Any] | None = None,
    success: bool = True,
) -> AuditEvent:
    event = AuditEvent(
        action=action,
        user_id=user_id,
        ip_address=ip_address,
        success=success,
        details=_redact(details or {}),
    )
    logger.log("INFO" if success else "WARNING", event.describe())
    _persist(event)
    return event


__all__ = ["AuditAction", "AuditEvent", "audit_log"]
