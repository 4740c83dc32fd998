# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    def __init__(
        self,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        # subclasses declare code and status as plain class attributes
        declared_code = getattr(type(self), "code", None)
        declared_status = getattr(type(self), "status", None)
        resolved_code = code or (declared_code if isinstance(declared_code, str) else "domain_error")
        resolved_status = status or (
            declared_status if isinstance(declared_status, HTTPStatus) else HTTPStatus.BAD_REQUEST
        )
        super().__init__(code=resolved_code, status=resolved_status, context=context)


class InfrastructureError(AppError):
    def __init__(
        self,
        code: str = "infrastructure_error",
        *,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_status = status or HTTPStatus.INTERNAL_SERVER_ERROR
        super().__init__(code=code, status=resolved_status, context=context)


class ValidationError(AppError):
    def __init__(
        self,
        code: str = "validation_error",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.BAD_REQUEST,
            context=context,
        )


class StorageError(InfrastructureError):
    def __init__(self, operation: str) -> None:
        super().__init__("storage_error", context={"operation": operation})


class UnauthenticatedError(AppError):
    def __init__(self) -> None:
        super().__init__(code="unauthorized", status=HTTPStatus.UNAUTHORIZED)


class UnsupportedContentTypeError(AppError):
    def __init__(self, expected: str) -> None:
        super().__init__(
            code="unsupported_content_type",
            status=HTTPStatus.BAD_REQUEST,
            context={"expected": expected},
        )
