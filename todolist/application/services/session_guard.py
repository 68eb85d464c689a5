# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from todolist.domain.users.entities import User
from todolist.domain.users.repositories import SessionCodec, UserRepository
from todolist.shared.logging import logger


class SessionGuard:
    """Maps an inbound ``Cookie`` header to the signed-in user, or ``None``.

    A missing cookie, a cookie that fails verification, and a cookie naming a
    user that no longer exists are indistinguishable to the caller.
    """

    def __init__(self, *, cookies: SessionCodec, users: UserRepository) -> None:
        self._cookies = cookies
        self._users = users

    def resolve(self, cookie_header: str | None) -> User | None:
        try:
            payload = self._cookies.parse(cookie_header)
            if payload is None:
                return None
            user = self._users.find_by_id(payload.user_id)
        except Exception as exc:
            logger.warning(f"session_guard: verification failed ({type(exc).__name__})")
            return None

        if user is None:
            logger.info(f"session_guard: stale session for user_id={payload.user_id}")
        return user
