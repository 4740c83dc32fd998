from __future__ import annotations

import pytest
from sqlalchemy.exc import DBAPIError, DisconnectionError, OperationalError

from loyalty.infrastructure.resilience import is_transient_db_error, retry_read
from loyalty.shared.config import ResilienceConfig


def _dropped() -> DBAPIError:
    return DBAPIError(
        "SELECT 1", {}, Exception("server closed the connection"), connection_invalidated=True
    )


@pytest.fixture()
def config() -> ResilienceConfig:
    return ResilienceConfig(max_retries=2, backoff_base=0.0, backoff_cap=0.0)


def test_dropped_connection_is_transient() -> None:
    assert is_transient_db_error(_dropped())
    assert is_transient_db_error(DisconnectionError("gone"))


def test_other_errors_are_not_transient() -> None:
    assert not is_transient_db_error(OperationalError("SELECT 1", {}, Exception("timeout")))
    assert not is_transient_db_error(ValueError("nope"))


def test_retry_read_recovers_from_dropped_connection(config: ResilienceConfig) -> None:
    calls = {"n": 0}

    def _read() -> str:
        calls["n"] += 1
        if calls["n"] < 3:
            raise _dropped()
        return "rows"

    assert retry_read(_read, config=config) == "rows"
    assert calls["n"] == 3


def test_retry_read_gives_up_after_limit(config: ResilienceConfig) -> None:
    calls = {"n": 0}

    def _read() -> str:
        calls["n"] += 1
        raise _dropped()

    with pytest.raises(DBAPIError):
        retry_read(_read, config=config)
    assert calls["n"] == 3


def test_retry_read_does_not_retry_timeouts(config: ResilienceConfig) -> None:
    calls = {"n": 0}

    def _read() -> str:
        calls["n"] += 1
        raise OperationalError("SELECT 1", {}, Exception("statement timeout"))

    with pytest.raises(OperationalError):
        retry_read(_read, config=config)
    assert calls["n"] == 1
