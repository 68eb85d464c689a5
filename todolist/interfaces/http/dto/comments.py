from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, Field, StrictStr

from todolist.domain.comments.entities import MAX_COMMENT_LENGTH


class EditCommentRequestDTO(BaseModel):
    invalid_detail: ClassVar[str] = (
        f"Comment must be text of 1 to {MAX_COMMENT_LENGTH} characters"
    )

    body: StrictStr = Field(min_length=1, max_length=MAX_COMMENT_LENGTH)


class CommentDTO(BaseModel):
    id: int
    todo_id: int
    body: str
    created_at: datetime
    updated_at: datetime
