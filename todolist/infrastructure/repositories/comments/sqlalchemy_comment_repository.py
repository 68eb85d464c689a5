# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from todolist.domain.comments.entities import Comment as DomainComment
from todolist.domain.comments.repositories import CommentRepository
from todolist.infrastructure.db.models import Comment
from todolist.infrastructure.db.session import session_scope


def _to_domain(row: Comment) -> DomainComment:
    return DomainComment(
        id=row.id,
        todo_id=row.todo_id,
        user_id=row.user_id,
        body=row.body,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyCommentRepository(CommentRepository):
    def find_for_user(self, comment_id: int, user_id: int) -> DomainComment | None:
        with session_scope() as session:
            row = (
                session.query(Comment)
                .filter(Comment.id == comment_id, Comment.user_id == user_id)
                .first()
            )
            return _to_domain(row) if row else None

    def save_body(self, comment: DomainComment) -> DomainComment:
        with session_scope() as session:
            row = session.get(Comment, comment.id)
            if row is None:
                raise LookupError(f"comment {comment.id} disappeared during edit")
            row.body = comment.body
            row.updated_at = comment.updated_at
            session.flush()
            return _to_domain(row)
