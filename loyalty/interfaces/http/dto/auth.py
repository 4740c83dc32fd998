from __future__ import annotations

from pydantic import BaseModel, field_validator
from pydantic_core import PydanticCustomError

from loyalty.application.services.password_hashing import MAX_PASSWORD_BYTES

MAX_LOGIN_LENGTH = 64


class CredentialsRequestDTO(BaseModel):
    login: str
    password: str

    @field_validator("login")
    @classmethod
    def validate_login(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise PydanticCustomError("missing", "Login cannot be empty", {})
        return value

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("missing", "Password cannot be empty", {})
        return value


class RegisterRequestDTO(CredentialsRequestDTO):
    @field_validator("login")
    @classmethod
    def limit_login(cls, value: str) -> str:
        if len(value) > MAX_LOGIN_LENGTH:
            raise PydanticCustomError(
                "login_too_long",
                "Login must be at most {max_length} characters",
                {"max_length": MAX_LOGIN_LENGTH},
            )
        return value

    @field_validator("password")
    @classmethod
    def limit_password(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise PydanticCustomError(
                "password_too_long",
                "Password must be at most {max_bytes} bytes",
                {"max_bytes": MAX_PASSWORD_BYTES},
            )
        return value


class LoginRequestDTO(CredentialsRequestDTO):
    """Only shape is checked; over-limit credentials simply fail to match."""


class AuthSuccessDTO(BaseModel):
    ok: bool = True
