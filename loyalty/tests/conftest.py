from __future__ import annotations

import threading
from collections.abc import Iterator, Sequence
from datetime import UTC, datetime, timedelta

import pytest
from flask import Flask

from loyalty.app import create_app
from loyalty.domain.orders.entities import Order, OrderClaim, OrderStatus
from loyalty.domain.users.entities import User
from loyalty.domain.users.exceptions import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from loyalty.infrastructure.container import Container
from loyalty.shared.config import AppConfig, DatabaseConfig

TEST_SECRET = "test-secret-that-is-long-enough-0123456789"
FAST_HASH = "pbkdf2:sha256:1000"


class InMemoryUserRepository:
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1
        self._lock = threading.Lock()

    def create_user(self, login: str, password_hash: str) -> int:
        with self._lock:
            if login in self._users:
                raise UserAlreadyExistsError()
            user = User(id=self._seq, login=login, password_hash=password_hash)
            self._seq += 1
            self._users[login] = user
            return user.id

    def get_user_by_login(self, login: str) -> User:
        try:
            return self._users[login]
        except KeyError:
            raise UserNotFoundError() from None


class InMemoryOrderRepository:
    """Conditional insert guarded by a lock, like a unique index would be."""

    def __init__(self) -> None:
        self._orders: dict[str, Order] = {}
        self._lock = threading.Lock()
        self._clock = datetime(2026, 1, 1, tzinfo=UTC)
        self.insert_attempts = 0

    def create_order_if_absent(self, user_id: int, number: str) -> OrderClaim:
        with self._lock:
            self.insert_attempts += 1
            existing = self._orders.get(number)
            if existing is not None:
                return OrderClaim(created=False, owner_id=existing.owner_id)
            self._clock += timedelta(seconds=1)
            self._orders[number] = Order(
                number=number,
                owner_id=user_id,
                status=OrderStatus.NEW,
                accrual=None,
                uploaded_at=self._clock,
            )
            return OrderClaim(created=True, owner_id=user_id)

    def list_orders_by_user(self, user_id: int) -> Sequence[Order]:
        orders = [o for o in self._orders.values() if o.owner_id == user_id]
        return sorted(orders, key=lambda o: o.uploaded_at, reverse=True)


class DeterministicHasher:
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def check(self, hashed: str, password: str) -> None:
        if hashed != f"hashed:{password}":
            raise InvalidCredentialsError()


class FrozenClock:
    def __init__(self, now: float = 1_700_000_000) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def orders() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture()
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture()
def app_config(tmp_path) -> AppConfig:
    return AppConfig(
        secret_key=TEST_SECRET,
        token_ttl=3600,
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'loyalty.db'}"),
    )


@pytest.fixture()
def container(app_config: AppConfig) -> Iterator[Container]:
    container = Container(app_config, password_method=FAST_HASH)
    yield container
    container.engine.dispose()


@pytest.fixture()
def app(container: Container) -> Flask:
    return create_app(container=container)
