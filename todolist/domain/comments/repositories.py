# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Comment


class CommentRepository(Protocol):
    def find_for_user(self, comment_id: int, user_id: int) -> Comment | None: ...
    def save_body(self, comment: Comment) -> Comment: ...
