# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import cast

from flask import Blueprint, g, jsonify, redirect, request
from flask.typing import ResponseReturnValue
from pydantic import ValidationError

from todolist.application.services.session_guard import SessionGuard
from todolist.application.use_cases.users.change_password import ChangePasswordUseCase
from todolist.domain.users.entities import SessionPayload, User
from todolist.domain.users.exceptions import PasswordChangeError
from todolist.domain.users.repositories import SessionCodec
from todolist.infrastructure.audit import AuditAction, audit_log
from todolist.interfaces.http.dto.auth import ChangePasswordPageDTO, ChangePasswordRequestDTO
from todolist.interfaces.http.guards import HOME_PATH, client_ip, session_required
from todolist.shared.errors.validation import raise_validation_error
from todolist.shared.logging import logger
from todolist.shared.middleware.csrf import csrf_protect
from todolist.shared.middleware.rate_limit import rate_limit

CHANGE_PASSWORD_PATH = "/change-password"


class PasswordController:
    def __init__(
        self,
        *,
        change_password_use_case: ChangePasswordUseCase,
        guard: SessionGuard,
        cookies: SessionCodec,
    ) -> None:
        self._change_password_use_case = change_password_use_case
        self._guard = guard
        self._cookies = cookies

    @session_required
    def page(self) -> ResponseReturnValue:
        return jsonify(ChangePasswordPageDTO().model_dump())

    @session_required
    @rate_limit(limit=5, window_seconds=60.0)
    @csrf_protect
    def change_password(self) -> ResponseReturnValue:
        user = cast(User, g.user)
        try:
            dto = ChangePasswordRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc, ChangePasswordRequestDTO.invalid_detail)

        ip_address = client_ip()

        try:
            updated = self._change_password_use_case.execute(
                user, dto.current_password, dto.new_password
            )
        except PasswordChangeError as exc:
            audit_log(
                AuditAction.PASSWORD_CHANGE_FAILED,
                user_id=user.id,
                ip_address=ip_address,
                details={"reason": exc.code},
                success=False,
            )
            raise

        audit_log(AuditAction.PASSWORD_CHANGED, user_id=updated.id, ip_address=ip_address)

        # rotating the credential keeps the user signed in with a fresh cookie
        response = redirect(HOME_PATH)
        response.headers.add(
            "Set-Cookie", self._cookies.serialize(SessionPayload(user_id=updated.id))
        )
        logger.info(f"auth.change_password: ok user_id={updated.id}")
        return response

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("password", __name__)
        bp.add_url_rule(CHANGE_PASSWORD_PATH, view_func=self.page, methods=["GET"])
        bp.add_url_rule(CHANGE_PASSWORD_PATH, view_func=self.change_password, methods=["POST"])
        return bp
