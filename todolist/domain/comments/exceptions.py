# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from todolist.shared.errors.base import DomainError


class EmptyCommentError(DomainError):
    code = "comment_empty"
    detail = "Comment cannot be empty"


class CommentNotFoundError(DomainError):
    code = "comment_not_found"
    status = HTTPStatus.NOT_FOUND

    def __init__(self, comment_id: int) -> None:
        super().__init__(context={"comment_id": comment_id})
