# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from .exceptions import PasswordsRequiredError, PasswordTooShortError

MIN_PASSWORD_LENGTH = 8


def check_password_change(current_password: str, new_password: str) -> None:
    """Presence first, then length. Never looks at stored credentials."""
    if not current_password or not new_password:
        raise PasswordsRequiredError()
    if len(new_password) < MIN_PASSWORD_LENGTH:
        raise PasswordTooShortError()


__all__ = ["MIN_PASSWORD_LENGTH", "check_password_change"]
