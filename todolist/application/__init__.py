# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.password_hashing import Argon2PasswordHasher
from .services.session_guard import SessionGuard
from .use_cases.comments.edit_comment import EditCommentUseCase
from .use_cases.users.change_password import ChangePasswordUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase

__all__ = [
    "Argon2PasswordHasher",
    "ChangePasswordUseCase",
    "EditCommentUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "SessionGuard",
]
