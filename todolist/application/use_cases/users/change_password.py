# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from todolist.domain.users.entities import User
from todolist.domain.users.exceptions import CurrentPasswordIncorrectError
from todolist.domain.users.password_policy import check_password_change
from todolist.domain.users.repositories import PasswordHasher, UserRepository
from todolist.shared.logging import logger


class ChangePasswordUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, user: User, current_password: str, new_password: str) -> User:
        check_password_change(current_password, new_password)

        if not self._password_hasher.verify(current_password, user.password_hash):
            logger.info(f"auth.change_password: current password mismatch user_id={user.id}")
            raise CurrentPasswordIncorrectError()

        hashed = self._password_hasher.hash(new_password)
        updated = self._users.update_password_hash(user.id, hashed)
        logger.info(f"auth.change_password: rotated credential user_id={user.id}")
        return updated
