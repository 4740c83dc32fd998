"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from loyalty.domain.users.exceptions import (
    CredentialsCheckError,
    InvalidCredentialsError,
    PasswordHashingError,
)
from loyalty.domain.users.repositories import PasswordHasher

# Longest accepted password in UTF-8 bytes. Kept at the bcrypt input limit so
# stored digests can be migrated between schemes without truncation.
MAX_PASSWORD_BYTES = 72


class WerkzeugPasswordHasher(PasswordHasher):
    def __init__(self, method: str = "scrypt") -> None:
        self._method = method

    def hash(self, password: str) -> str:
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise PasswordHashingError(f"password exceeds {MAX_PASSWORD_BYTES} bytes")
        try:
            return str(generate_password_hash(password, method=self._method))
        except ValueError as exc:
            raise PasswordHashingError(str(exc)) from exc

    def check(self, hashed: str, password: str) -> None:
        parts = hashed.split("$", 2)
        if len(parts) != 3 or not all(parts):
            raise CredentialsCheckError("malformed digest")
        try:
            ok = check_password_hash(hashed, password)
        except ValueError as exc:
            raise CredentialsCheckError(str(exc)) from exc
        if not ok:
            raise InvalidCredentialsError()
