# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from functools import cached_property

from todolist.domain.users.entities import User
from todolist.domain.users.exceptions import InvalidCredentialsError
from todolist.domain.users.repositories import PasswordHasher, UserRepository
from todolist.shared.logging import logger


class LoginUserUseCase:
    """Checks a username/password pair.

    Unknown usernames still pay for one hash verification, so response time
    does not reveal which accounts exist. Hashes made with outdated
    parameters are upgraded on the next successful login.
    """

    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    @cached_property
    def _decoy_hash(self) -> str:
        return self._password_hasher.hash(secrets.token_urlsafe(16))

    def execute(self, username: str, password: str) -> User:
        user = self._users.find_by_username(username)
        if user is None:
            self._password_hasher.verify(password, self._decoy_hash)
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        if self._password_hasher.needs_rehash(user.password_hash):
            logger.info(f"auth.login: upgrading password hash user_id={user.id}")
            user = self._users.update_password_hash(
                user.id, self._password_hasher.hash(password)
            )
        return user
