# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import INVALID_BODY_DETAIL, ValidationError


def _field_name(loc: tuple[int | str, ...]) -> str:
    # an empty location means the body itself had the wrong shape
    return ".".join(str(part) for part in loc) or "body"


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    """Flatten pydantic errors, keyed by the names the client sent."""
    errors = [
        {
            "field": _field_name(error["loc"]),
            "type": error["type"],
            "message": error["msg"],
        }
        for error in exc.errors(include_url=False, include_input=False)
    ]
    return {
        "fields": sorted({entry["field"] for entry in errors}),
        "errors": errors,
    }


def raise_validation_error(
    exc: PydanticValidationError, detail: str = INVALID_BODY_DETAIL
) -> NoReturn:
    raise ValidationError(detail=detail, context=format_pydantic_errors(exc)) from exc


__all__ = ["format_pydantic_errors", "raise_validation_error"]
