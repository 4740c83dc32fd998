# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Retry policy for idempotent storage reads."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from sqlalchemy.exc import DBAPIError, DisconnectionError
from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from loyalty.shared.config import ResilienceConfig
from loyalty.shared.logging import logger

T = TypeVar("T")


def is_transient_db_error(exc: BaseException) -> bool:
    """Only dropped connections are worth retrying; timeouts and cancellations are not."""
    if isinstance(exc, DisconnectionError):
        return True
    return isinstance(exc, DBAPIError) and bool(exc.connection_invalidated)


def _log_retry(state: RetryCallState) -> None:
    exc = state.outcome.exception() if state.outcome else None
    logger.warning(
        f"storage.retry: attempt {state.attempt_number} failed with {type(exc).__name__}"
    )


def retry_read(func: Callable[[], T], *, config: ResilienceConfig) -> T:
    """Run an idempotent read, retrying on transient connection failures.

    Writes must never go through here: a repeated conditional insert could
    observe its own first attempt and report the wrong outcome.
    """
    retrying = Retrying(
        stop=stop_after_attempt(config.max_retries + 1),
        wait=wait_exponential(multiplier=config.backoff_base, max=config.backoff_cap),
        retry=retry_if_exception(is_transient_db_error),
        before_sleep=_log_retry,
        reraise=True,
    )
    return retrying(func)


__all__ = ["is_transient_db_error", "retry_read"]
