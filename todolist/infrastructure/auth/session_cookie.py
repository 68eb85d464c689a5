# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed session cookie carrying ``{"userId": <id>}``."""

from __future__ import annotations

from typing import Any

from itsdangerous import BadSignature, URLSafeTimedSerializer
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from werkzeug.http import dump_cookie, parse_cookie

from todolist.domain.users.entities import SessionPayload
from todolist.domain.users.repositories import SessionCodec
from todolist.shared.config.settings import SecurityConfig
from todolist.shared.logging import logger

_SALT = "todolist.session"


class _CookieBody(BaseModel):
    user_id: int = Field(alias="userId", gt=0, strict=True)

    model_config = ConfigDict(validate_by_name=True, extra="ignore")


class SignedSessionCookie(SessionCodec):
    def __init__(self, secret_key: str, security: SecurityConfig) -> None:
        self._serializer = URLSafeTimedSerializer(secret_key, salt=_SALT)
        self._security = security

    @property
    def name(self) -> str:
        return self._security.session_cookie_name

    def parse(self, cookie_header: str | None) -> SessionPayload | None:
        if not cookie_header:
            return None
        token = parse_cookie(cookie_header).get(self.name)
        if not token:
            return None
        try:
            data: Any = self._serializer.loads(token, max_age=self._security.session_max_age)
        except BadSignature as exc:
            # SignatureExpired is a BadSignature too
            logger.info(f"session_cookie: rejected token ({type(exc).__name__})")
            return None
        try:
            body = _CookieBody.model_validate(data)
        except PydanticValidationError:
            logger.warning("session_cookie: signed payload has an unexpected shape")
            return None
        return SessionPayload(user_id=body.user_id)

    def serialize(self, payload: SessionPayload) -> str:
        body = _CookieBody(user_id=payload.user_id)
        token = self._serializer.dumps(body.model_dump(by_alias=True))
        return self._dump(token, max_age=self._security.session_max_age)

    def destroy(self) -> str:
        return self._dump("", max_age=0, expires=0)

    def _dump(self, value: str, **kwargs: Any) -> str:
        return dump_cookie(
            self.name,
            value,
            path="/",
            httponly=True,
            secure=self._security.cookie_secure,
            samesite=self._security.cookie_samesite,
            **kwargs,
        )


__all__ = ["SignedSessionCookie"]
