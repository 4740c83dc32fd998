# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEV_SECRET_KEY = "dev-only-loyalty-secret-change-me-0123456789"
MIN_SECRET_BYTES = 32


def _parse_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


class _Section(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )


class DatabaseConfig(_Section):
    url: str = Field("sqlite:///loyalty.db", alias="DATABASE_URI")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")
    statement_timeout: float = Field(10.0, gt=0, alias="DATABASE_STATEMENT_TIMEOUT")


class ResilienceConfig(_Section):
    max_retries: int = Field(3, ge=0, alias="RESILIENCE_RETRIES")
    backoff_base: float = Field(0.1, ge=0.0, alias="RESILIENCE_BACKOFF_BASE")
    backoff_cap: float = Field(2.0, ge=0.0, alias="RESILIENCE_BACKOFF_CAP")


class ObservabilityConfig(_Section):
    metrics_enabled: bool = Field(True, alias="METRICS_ENABLED")

    @field_validator("metrics_enabled", mode="before")
    @classmethod
    def _parse_metrics(cls, value: str | bool) -> bool:
        return _parse_bool(value)


class SecurityConfig(_Section):
    auth_cookie_name: str = Field("auth_token", alias="AUTH_COOKIE_NAME")
    cookie_secure: bool = Field(False, alias="COOKIE_SECURE")
    cookie_samesite: str = Field("Lax", alias="COOKIE_SAMESITE")

    allowed_origins: list[str] = Field(["*"], alias="ALLOWED_ORIGINS")

    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("cookie_secure", "enable_hsts", mode="before")
    @classmethod
    def _parse_flags(cls, value: str | bool) -> bool:
        return _parse_bool(value)


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    secret_key: str = Field(DEV_SECRET_KEY, alias="SECRET_KEY")
    token_ttl: int = Field(60 * 60 * 24, gt=0, alias="TOKEN_TTL")
    run_address: str = Field("localhost:8080", alias="RUN_ADDRESS")
    accrual_system_address: str | None = Field(None, alias="ACCRUAL_SYSTEM_ADDRESS")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: Path | None = Field(None, alias="LOG_FILE")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    resilience: ResilienceConfig = Field(default_factory=ResilienceConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @field_validator("secret_key")
    @classmethod
    def _check_secret_length(cls, value: str) -> str:
        if len(value.encode("utf-8")) < MIN_SECRET_BYTES:
            raise ValueError(f"SECRET_KEY must be at least {MIN_SECRET_BYTES} bytes")
        return value

    @model_validator(mode="after")
    def _refuse_dev_secret_in_production(self) -> AppConfig:
        if self.is_production() and self.secret_key == DEV_SECRET_KEY:
            raise ValueError("SECRET_KEY: the development key must not be used in production")
        return self

    def production_warnings(self) -> list[str]:
        """Settings that are legal but unsafe outside development."""
        if not self.is_production():
            return []
        warnings = []
        if not self.security.cookie_secure:
            warnings.append("session cookie is sent without the Secure flag")
        if "*" in self.security.allowed_origins:
            warnings.append("CORS accepts any origin")
        return warnings

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")

    def validate_startup(self) -> None:
        """Reject configurations the server cannot start with."""
        if not self.run_address.strip():
            raise ValueError("RUN_ADDRESS/-a is empty")
        if not self.database.url.strip():
            raise ValueError("DATABASE_URI/-d is empty")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()


__all__ = [
    "AppConfig",
    "DatabaseConfig",
    "ObservabilityConfig",
    "ResilienceConfig",
    "SecurityConfig",
    "load_config",
]
