# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Callable
from functools import wraps

from flask import Request, g, request

from loyalty.domain.users.exceptions import ExpiredTokenError, MalformedTokenError
from loyalty.domain.users.repositories import TokenCodec
from loyalty.shared.errors import UnauthenticatedError
from loyalty.shared.logging import logger


class RequestAuthenticator:
    """Resolve the caller of a request from the session token cookie."""

    def __init__(
        self,
        *,
        tokens: TokenCodec,
        cookie_name: str = "auth_token",
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._tokens = tokens
        self._cookie_name = cookie_name
        self._clock = clock

    @property
    def cookie_name(self) -> str:
        return self._cookie_name

    def authenticate(self, req: Request) -> int:
        token = req.cookies.get(self._cookie_name, "").strip()
        if not token:
            logger.warning(f"No {self._cookie_name} cookie on {req.method} {req.path}")
            raise UnauthenticatedError()

        try:
            return self._tokens.verify(token, int(self._clock()))
        except (MalformedTokenError, ExpiredTokenError) as exc:
            logger.warning(f"Auth failed ({exc.code}) on {req.method} {req.path}")
            raise UnauthenticatedError() from exc

    def required(self, f):
        @wraps(f)
        def inner(*a, **kw):
            g.user_id = self.authenticate(request)
            logger.debug(f"Auth OK: user={g.user_id} {request.method} {request.path}")
            return f(*a, **kw)

        return inner


def current_user_id() -> int:
    """Identity set by :meth:`RequestAuthenticator.required` for this request."""
    return int(g.user_id)


__all__ = ["RequestAuthenticator", "current_user_id"]
