# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify, redirect, request
from flask.typing import ResponseReturnValue
from pydantic import ValidationError

from todolist.application.services.session_guard import SessionGuard
from todolist.application.use_cases.users.login_user import LoginUserUseCase
from todolist.domain.users.entities import SessionPayload
from todolist.domain.users.exceptions import InvalidCredentialsError
from todolist.domain.users.repositories import SessionCodec
from todolist.infrastructure.audit import AuditAction, audit_log
from todolist.interfaces.http.dto.auth import LoginRequestDTO, PageDTO
from todolist.interfaces.http.guards import HOME_PATH, LOGIN_PATH, client_ip
from todolist.shared.errors.validation import raise_validation_error
from todolist.shared.logging import logger
from todolist.shared.middleware.csrf import csrf_protect
from todolist.shared.middleware.rate_limit import rate_limit


class AuthController:
    def __init__(
        self,
        *,
        login_use_case: LoginUserUseCase,
        guard: SessionGuard,
        cookies: SessionCodec,
    ) -> None:
        self._login_use_case = login_use_case
        self._guard = guard
        self._cookies = cookies

    def login_page(self) -> ResponseReturnValue:
        if self._guard.resolve(request.headers.get("Cookie")) is not None:
            return redirect(HOME_PATH)
        return jsonify(PageDTO(title="Login").model_dump())

    @rate_limit(limit=10, window_seconds=60.0)
    @csrf_protect
    def login(self) -> ResponseReturnValue:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc, LoginRequestDTO.invalid_detail)

        ip_address = client_ip()

        try:
            user = self._login_use_case.execute(dto.username, dto.password)
        except InvalidCredentialsError:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"username": dto.username},
                success=False,
            )
            raise

        audit_log(
            AuditAction.LOGIN_SUCCESS,
            user_id=user.id,
            ip_address=ip_address,
            details={"username": dto.username},
        )

        response = redirect(HOME_PATH)
        response.headers.add("Set-Cookie", self._cookies.serialize(SessionPayload(user_id=user.id)))
        logger.info(f"auth.login: ok user_id={user.id}")
        return response

    @csrf_protect
    def logout(self) -> ResponseReturnValue:
        user = self._guard.resolve(request.headers.get("Cookie"))

        audit_log(
            AuditAction.LOGOUT,
            user_id=user.id if user else None,
            ip_address=client_ip(),
        )

        response = redirect(LOGIN_PATH)
        response.headers.add("Set-Cookie", self._cookies.destroy())
        logger.info("auth.logout: ok")
        return response

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule(LOGIN_PATH, view_func=self.login_page, methods=["GET"])
        bp.add_url_rule(LOGIN_PATH, view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        return bp
