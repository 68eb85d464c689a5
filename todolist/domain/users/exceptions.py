# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from todolist.shared.errors.base import DomainError


class UserAlreadyExistsError(DomainError):
    code = "user_already_exists"
    detail = "A user with this username already exists"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    detail = "Invalid username or password"


class PasswordChangeError(DomainError):
    code = "password_change_failed"


class PasswordsRequiredError(PasswordChangeError):
    code = "passwords_required"
    detail = "Current password and new password are required"


class PasswordTooShortError(PasswordChangeError):
    code = "password_too_short"
    detail = "New password must be at least 8 characters long"


class CurrentPasswordIncorrectError(PasswordChangeError):
    code = "current_password_incorrect"
    detail = "Current password is incorrect"
