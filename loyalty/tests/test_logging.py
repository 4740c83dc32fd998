from __future__ import annotations

from loyalty.application.services.token_codec import HmacTokenCodec
from loyalty.shared.logging import (
    clear_correlation_id,
    get_correlation_id,
    sanitize_message,
    set_correlation_id,
)

from .conftest import TEST_SECRET


def test_password_is_redacted() -> None:
    assert sanitize_message("login failed password=hunter2") == (
        "login failed password=***REDACTED***"
    )


def test_session_token_is_redacted() -> None:
    token = HmacTokenCodec(TEST_SECRET).issue(1, 1_700_000_000, 60)

    sanitized = sanitize_message(f"issued {token} for user")

    assert token not in sanitized


def test_database_credentials_are_redacted() -> None:
    sanitized = sanitize_message("connecting to postgresql://app:pa55@db:5432/loyalty")

    assert "pa55" not in sanitized
    assert "postgresql://app:***REDACTED***@db:5432/loyalty" in sanitized


def test_plain_message_untouched() -> None:
    assert sanitize_message("orders.submit: accepted user_id=3") == (
        "orders.submit: accepted user_id=3"
    )


def test_correlation_id_lifecycle() -> None:
    set_correlation_id("abc")
    assert get_correlation_id() == "abc"

    clear_correlation_id()
    assert get_correlation_id() == "-"
