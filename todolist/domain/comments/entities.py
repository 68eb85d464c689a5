# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from .exceptions import EmptyCommentError

MAX_COMMENT_LENGTH = 2000


@dataclass(slots=True, frozen=True)
class Comment:

    id: int
    todo_id: int
    user_id: int
    body: str
    created_at: datetime
    updated_at: datetime

    def edited(self, body: str, at: datetime) -> Comment:
        text = body.strip()
        if not text:
            raise EmptyCommentError()
        return replace(self, body=text, updated_at=at)
