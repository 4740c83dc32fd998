# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Callable

from loyalty.domain.users.repositories import PasswordHasher, TokenCodec, UserRepository
from loyalty.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenCodec,
        password_hasher: PasswordHasher,
        token_ttl: int,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        self._token_ttl = token_ttl
        self._clock = clock

    def execute(self, login: str, password: str) -> tuple[int, str]:
        hashed = self._password_hasher.hash(password)
        # uniqueness is enforced by storage; a lookup first would race
        user_id = self._users.create_user(login, hashed)
        token = self._tokens.issue(user_id, int(self._clock()), self._token_ttl)
        logger.info(f"users.register: created user_id={user_id}")
        return user_id, token
