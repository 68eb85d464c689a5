# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Password hashing strategies."""

from __future__ import annotations

from argon2 import PasswordHasher as _Argon2
from argon2.exceptions import VerifyMismatchError

from todolist.domain.users.repositories import PasswordHasher
from todolist.shared.config.settings import PasswordConfig


class Argon2PasswordHasher(PasswordHasher):
    """argon2id hashes in the PHC string format ($argon2id$v=19$...).

    Verification is constant time inside libargon2. Only a mismatch maps to
    ``False``; a malformed stored hash raises so the request fails loudly.
    """

    def __init__(self, config: PasswordConfig | None = None) -> None:
        config = config or PasswordConfig()  # type: ignore[call-arg]
        self._hasher = _Argon2(
            time_cost=config.time_cost,
            memory_cost=config.memory_cost,
            parallelism=config.parallelism,
        )

    def hash(self, password: str) -> str:
        return self._hasher.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return self._hasher.verify(hashed, password)
        except VerifyMismatchError:
            return False

    def needs_rehash(self, hashed: str) -> bool:
        """True when ``hashed`` was made with other cost parameters than the current ones."""
        return self._hasher.check_needs_rehash(hashed)
