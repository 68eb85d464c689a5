# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from todolist.domain.users.entities import User as DomainUser
from todolist.domain.users.repositories import UserRepository
from todolist.infrastructure.db.models import User
from todolist.infrastructure.db.session import session_scope


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def find_by_username(self, username: str) -> DomainUser | None:
        with session_scope() as session:
            row = session.query(User).filter(User.username == username).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with session_scope() as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        with session_scope() as session:
            row = User(
                username=user.username,
                password_hash=user.password_hash,
                created_at=user.created_at,
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            return _to_domain(row)

    def update_password_hash(self, user_id: int, password_hash: str) -> DomainUser:
        with session_scope() as session:
            row = session.get(User, user_id)
            if row is None:
                raise LookupError(f"user {user_id} disappeared during password update")
            row.password_hash = password_hash
            session.flush()
            return _to_domain(row)
