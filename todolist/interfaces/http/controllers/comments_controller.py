# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import cast

from flask import Blueprint, g, jsonify, request
from flask.typing import ResponseReturnValue
from pydantic import ValidationError

from todolist.application.services.session_guard import SessionGuard
from todolist.application.use_cases.comments.edit_comment import EditCommentUseCase
from todolist.domain.users.entities import User
from todolist.infrastructure.audit import AuditAction, audit_log
from todolist.interfaces.http.dto.comments import CommentDTO, EditCommentRequestDTO
from todolist.interfaces.http.guards import client_ip, session_required
from todolist.shared.errors.validation import raise_validation_error
from todolist.shared.middleware.csrf import csrf_protect


class CommentsController:
    def __init__(self, *, edit_comment_use_case: EditCommentUseCase, guard: SessionGuard) -> None:
        self._edit_comment_use_case = edit_comment_use_case
        self._guard = guard

    @session_required
    @csrf_protect
    def edit(self, comment_id: int) -> ResponseReturnValue:
        user = cast(User, g.user)
        try:
            dto = EditCommentRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc, EditCommentRequestDTO.invalid_detail)

        comment = self._edit_comment_use_case.execute(comment_id, user.id, dto.body)

        audit_log(
            AuditAction.COMMENT_UPDATED,
            user_id=user.id,
            ip_address=client_ip(),
            details={"comment_id": comment.id},
        )

        payload = CommentDTO(
            id=comment.id,
            todo_id=comment.todo_id,
            body=comment.body,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
        return jsonify({"comment": payload.model_dump(mode="json")}), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("comments", __name__, url_prefix="/api/comments")
        bp.add_url_rule("/<int:comment_id>", view_func=self.edit, methods=["PATCH"])
        return bp
