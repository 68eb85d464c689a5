# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from todolist.domain.users.entities import User
from todolist.domain.users.exceptions import PasswordTooShortError, UserAlreadyExistsError
from todolist.domain.users.password_policy import MIN_PASSWORD_LENGTH
from todolist.domain.users.repositories import PasswordHasher, UserRepository


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> User:
        if self._users.find_by_username(username):
            raise UserAlreadyExistsError()
        if len(password) < MIN_PASSWORD_LENGTH:
            raise PasswordTooShortError(
                detail=f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )
        hashed = self._password_hasher.hash(password)
        user = User(id=0, username=username, password_hash=hashed, created_at=datetime.now(UTC))
        return self._users.add(user)
