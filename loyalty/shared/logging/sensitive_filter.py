# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Redaction applied to every log record before it reaches a sink."""

from __future__ import annotations

import re
from typing import Any

_REDACTED = "***REDACTED***"

_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"(secret[_-]?key\s*[:=]\s*['\"]?)[\w\-]{20,}", re.I), rf"\1{_REDACTED}"),
    (re.compile(r"(bearer\s+)[\w\-.]{20,}", re.I), rf"\1{_REDACTED}"),
    (re.compile(r"((?:auth[_-]?)?token\s*[:=]\s*['\"]?)[\w\-.]{20,}", re.I), rf"\1{_REDACTED}"),
    # bare session tokens: <payload>.<43-char signature>
    (re.compile(r"\b[\w\-]{20,}\.[\w\-]{43}\b"), "***TOKEN***"),
    (re.compile(r"(password\s*[:=]\s*['\"]?)[^'\"\s,}]+", re.I), rf"\1{_REDACTED}"),
    (re.compile(r"((?:cookie|authorization)\s*:\s*['\"]?)[^'\"]{10,}", re.I), rf"\1{_REDACTED}"),
    (re.compile(r"(\w+(?:\+\w+)?://[^:/@\s]+:)[^@\s]+@"), rf"\1{_REDACTED}@"),
)


def sanitize_message(message: str) -> str:
    for pattern, replacement in _RULES:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """loguru filter: scrub the message in place and always keep the record."""
    record["message"] = sanitize_message(record["message"])
    return True


__all__ = ["sanitize_message", "sanitize_record"]
