# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import User
from .exceptions import (
    CredentialsCheckError,
    ExpiredTokenError,
    InvalidCredentialsError,
    MalformedTokenError,
    PasswordHashingError,
    TokenIssueError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from .repositories import PasswordHasher, TokenCodec, UserRepository

__all__ = [
    "CredentialsCheckError",
    "ExpiredTokenError",
    "InvalidCredentialsError",
    "MalformedTokenError",
    "PasswordHasher",
    "PasswordHashingError",
    "TokenCodec",
    "TokenIssueError",
    "User",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserRepository",
]
