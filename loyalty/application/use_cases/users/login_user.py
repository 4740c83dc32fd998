# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Callable

from loyalty.application.services.password_hashing import MAX_PASSWORD_BYTES
from loyalty.domain.users.exceptions import InvalidCredentialsError, UserNotFoundError
from loyalty.domain.users.repositories import PasswordHasher, TokenCodec, UserRepository
from loyalty.shared.logging import logger


class LoginUserUseCase:
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

    def execute(self, login: str, password: str) -> str:
        try:
            user = self._users.get_user_by_login(login)
        except UserNotFoundError as exc:
            # same answer as a wrong password so logins cannot be probed
            logger.info("users.login: unknown login")
            raise InvalidCredentialsError() from exc

        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            # never accepted at registration, so it cannot match
            logger.info(f"users.login: over-limit password for user_id={user.id}")
            raise InvalidCredentialsError()

        try:
            self._password_hasher.check(user.password_hash, password)
        except InvalidCredentialsError:
            logger.info(f"users.login: wrong password for user_id={user.id}")
            raise

        return self._tokens.issue(user.id, int(self._clock()), self._token_ttl)
