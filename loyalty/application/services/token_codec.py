# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless signed session tokens.

A token is ``<payload>.<signature>`` where ``payload`` is the unpadded
base64url encoding of ``{"uid": ..., "iat": ..., "exp": ...}`` and
``signature`` is the unpadded base64url HMAC-SHA256 of the encoded payload
segment. Nothing is stored server side; a token stays valid until ``exp``.

Verification runs in a fixed order: structure, signature, payload, expiry.
Structural and signature failures are reported with the same error so a
caller cannot tell which check rejected a forged token, and the payload is
never looked at before its signature has been checked.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic import ValidationError as PydanticValidationError

from loyalty.domain.users.exceptions import (
    ExpiredTokenError,
    MalformedTokenError,
    TokenIssueError,
)
from loyalty.domain.users.repositories import TokenCodec

MIN_SECRET_BYTES = 32
SEPARATOR = "."


class TokenPayload(BaseModel):
    subject_id: StrictInt = Field(alias="uid")
    issued_at: StrictInt = Field(alias="iat")
    expires_at: StrictInt = Field(alias="exp")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


def _b64encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _b64decode(segment: str) -> bytes:
    padded = segment + "=" * (-len(segment) % 4)
    return base64.b64decode(padded.encode("ascii"), altchars=b"-_", validate=True)


class HmacTokenCodec(TokenCodec):
    def __init__(self, secret: str | bytes) -> None:
        self._secret = secret.encode("utf-8") if isinstance(secret, str) else bytes(secret)

    def _sign(self, payload_segment: str) -> bytes:
        return hmac.new(self._secret, payload_segment.encode("ascii"), hashlib.sha256).digest()

    def issue(self, subject_id: int, now: int, ttl: int) -> str:
        if subject_id <= 0:
            raise TokenIssueError("subject id must be positive")
        if len(self._secret) < MIN_SECRET_BYTES:
            raise TokenIssueError(f"secret must be at least {MIN_SECRET_BYTES} bytes")
        if ttl <= 0:
            raise TokenIssueError("ttl must be positive")

        now, ttl = int(now), int(ttl)
        payload = TokenPayload(subject_id=subject_id, issued_at=now, expires_at=now + ttl)
        segment = _b64encode(payload.model_dump_json(by_alias=True).encode("utf-8"))
        return f"{segment}{SEPARATOR}{_b64encode(self._sign(segment))}"

    def decode(self, token: str) -> TokenPayload:
        """Return the payload of a correctly signed token without checking expiry."""
        parts = token.split(SEPARATOR)
        if len(parts) != 2 or not all(parts):
            raise MalformedTokenError()
        segment, signature = parts

        try:
            expected = self._sign(segment)
            got = _b64decode(signature)
        except (UnicodeEncodeError, binascii.Error, ValueError) as exc:
            raise MalformedTokenError() from exc
        # compare the canonical encoding too, so unused trailing bits cannot vary
        if not hmac.compare_digest(got, expected) or _b64encode(got) != signature:
            raise MalformedTokenError()

        try:
            payload = TokenPayload.model_validate_json(_b64decode(segment))
        except (binascii.Error, ValueError, PydanticValidationError) as exc:
            raise MalformedTokenError() from exc
        if payload.subject_id <= 0:
            raise MalformedTokenError()
        return payload

    def verify(self, token: str, now: int) -> int:
        payload = self.decode(token)
        if now >= payload.expires_at:
            raise ExpiredTokenError()
        return payload.subject_id


__all__ = ["HmacTokenCodec", "MIN_SECRET_BYTES", "TokenPayload"]
