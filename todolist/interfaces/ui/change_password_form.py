# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from todolist.domain.users.password_policy import MIN_PASSWORD_LENGTH

CURRENT = "currentPassword"
NEW = "newPassword"


class ChangePasswordForm:
    """Client-side state of the change-password page.

    Checks run before anything is sent; the server repeats them, and whatever
    ``detail`` it answers with is kept for display.
    """

    def __init__(self) -> None:
        self._values: dict[str, str] = {CURRENT: "", NEW: ""}
        self.errors: dict[str, str] = {}
        self.server_detail: str | None = None

    def set(self, field: str, value: str) -> None:
        if field not in self._values:
            raise KeyError(field)
        self._values[field] = value

    def get(self, field: str) -> str:
        return self._values[field]

    @property
    def new_password_long_enough(self) -> bool:
        return len(self._values[NEW]) >= MIN_PASSWORD_LENGTH

    def validate(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        if not self._values[CURRENT]:
            errors[CURRENT] = "Current password is required"
        if not self._values[NEW]:
            errors[NEW] = "New password is required"
        elif not self.new_password_long_enough:
            errors[NEW] = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        self.errors = errors
        return errors

    def submission(self) -> dict[str, str] | None:
        """JSON body for ``POST /change-password``, or ``None`` while invalid."""
        if self.validate():
            return None
        return dict(self._values)

    def receive(self, action_data: Mapping[str, Any] | None) -> None:
        detail = (action_data or {}).get("detail")
        self.server_detail = detail if isinstance(detail, str) and detail else None


__all__ = ["ChangePasswordForm"]
