# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

INVALID_BODY_DETAIL = "Request body is invalid"


@dataclass(slots=True)
class AppError(Exception):
    """Error answered as ``{"error": code, "detail"?: ..., "context"?: ...}``."""

    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None
    detail: str | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.detail or self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        if self.detail:
            payload["detail"] = self.detail
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    """Business-rule failure; subclasses declare ``code``, ``status`` and ``detail``."""

    code = "domain_error"
    status = HTTPStatus.BAD_REQUEST
    detail = None

    def __init__(
        self,
        *,
        detail: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        cls = type(self)
        super().__init__(
            code=cls.code,
            status=cls.status,
            context=context,
            detail=detail or cls.detail,
        )


class ValidationError(AppError):
    """A request body that could not be decoded into its DTO."""

    def __init__(
        self,
        *,
        detail: str = INVALID_BODY_DETAIL,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="validation_error",
            status=HTTPStatus.UNPROCESSABLE_ENTITY,
            context=context,
            detail=detail,
        )
