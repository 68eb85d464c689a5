# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Masks credentials in log messages before they reach any sink."""

from __future__ import annotations

import re
from typing import Any

MASK = "***REDACTED***"

_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    # password fields in query strings and JSON bodies, camelCase keys included
    (
        re.compile(r"""(\w*password['"]?\s*[:=]\s*['"]?)[^'"\s,}&]+""", re.IGNORECASE),
        rf"\g<1>{MASK}",
    ),
    (
        re.compile(r"""((?:secret_?key|token)\s*[:=]\s*['"]?)[\w.\-]{8,}""", re.IGNORECASE),
        rf"\g<1>{MASK}",
    ),
    (re.compile(r"(bearer\s+)[\w.\-]{20,}", re.IGNORECASE), rf"\g<1>{MASK}"),
    # whole header values; the session cookie is signed but still a credential
    (re.compile(r"((?:cookie|authorization)\s*:\s*).+", re.IGNORECASE), rf"\g<1>{MASK}"),
    (re.compile(r"(\bauth=)[\w.\-]{20,}"), rf"\g<1>{MASK}"),
    (re.compile(r"(\$argon2(?:id|i|d)\$)\S+"), rf"\g<1>{MASK}"),
    # user:password@host in database urls
    (re.compile(r"(\w+(?:\+\w+)?://[^:/@\s]+:)[^@\s]+@"), rf"\g<1>{MASK}@"),
)


def sanitize_message(message: str) -> str:
    for pattern, replacement in _RULES:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> None:
    """loguru patcher: masks secrets in the rendered message in place."""
    if "message" in record:
        record["message"] = sanitize_message(record["message"])


__all__ = ["MASK", "sanitize_message", "sanitize_record"]
