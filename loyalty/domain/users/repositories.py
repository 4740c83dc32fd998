# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import User


class UserRepository(Protocol):
    def create_user(self, login: str, password_hash: str) -> int: ...
    def get_user_by_login(self, login: str) -> User: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def check(self, hashed: str, password: str) -> None: ...


class TokenCodec(Protocol):
    def issue(self, subject_id: int, now: int, ttl: int) -> str: ...
    def verify(self, token: str, now: int) -> int: ...
