# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from todolist.domain.comments.entities import Comment
from todolist.domain.comments.exceptions import CommentNotFoundError
from todolist.domain.comments.repositories import CommentRepository


class EditCommentUseCase:
    """Applies a confirmed draft to a comment owned by ``user_id``."""

    def __init__(self, *, comments: CommentRepository) -> None:
        self._comments = comments

    def execute(self, comment_id: int, user_id: int, body: str) -> Comment:
        comment = self._comments.find_for_user(comment_id, user_id)
        if comment is None:
            # someone else's comment looks exactly like a missing one
            raise CommentNotFoundError(comment_id)
        edited = comment.edited(body, datetime.now(UTC))
        if edited.body == comment.body:
            return comment
        return self._comments.save_body(edited)
