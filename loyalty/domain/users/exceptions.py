# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from loyalty.shared.errors.base import DomainError, InfrastructureError


class UserAlreadyExistsError(DomainError):
    code = "user_already_exists"
    status = HTTPStatus.CONFLICT


class UserNotFoundError(DomainError):
    code = "user_not_found"
    status = HTTPStatus.NOT_FOUND


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED


class MalformedTokenError(DomainError):
    code = "token_malformed"
    status = HTTPStatus.UNAUTHORIZED


class ExpiredTokenError(DomainError):
    code = "token_expired"
    status = HTTPStatus.UNAUTHORIZED


class TokenIssueError(InfrastructureError):
    def __init__(self, reason: str) -> None:
        super().__init__("token_issue_failed", context={"reason": reason})


class PasswordHashingError(InfrastructureError):
    def __init__(self, reason: str) -> None:
        super().__init__("password_hashing_failed", context={"reason": reason})


class CredentialsCheckError(InfrastructureError):
    def __init__(self, reason: str) -> None:
        super().__init__("credentials_check_failed", context={"reason": reason})
