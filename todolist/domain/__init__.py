# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .comments.entities import Comment
from .comments.exceptions import CommentNotFoundError, EmptyCommentError
from .users.entities import SessionPayload, User
from .users.exceptions import (
    CurrentPasswordIncorrectError,
    InvalidCredentialsError,
    PasswordChangeError,
    PasswordsRequiredError,
    PasswordTooShortError,
    UserAlreadyExistsError,
)
from .users.password_policy import MIN_PASSWORD_LENGTH

__all__ = [
    "Comment",
    "CommentNotFoundError",
    "CurrentPasswordIncorrectError",
    "EmptyCommentError",
    "InvalidCredentialsError",
    "MIN_PASSWORD_LENGTH",
    "PasswordChangeError",
    "PasswordTooShortError",
    "PasswordsRequiredError",
    "SessionPayload",
    "User",
    "UserAlreadyExistsError",
]
