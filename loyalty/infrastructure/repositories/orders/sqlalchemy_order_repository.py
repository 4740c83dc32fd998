# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from sqlalchemy import insert, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from loyalty.domain.orders.entities import Order as DomainOrder
from loyalty.domain.orders.entities import OrderClaim, OrderStatus
from loyalty.domain.orders.repositories import OrderRepository
from loyalty.infrastructure.db.models import Order
from loyalty.infrastructure.resilience import retry_read
from loyalty.infrastructure.unit_of_work import unit_of_work_scope
from loyalty.shared.config import ResilienceConfig
from loyalty.shared.errors import StorageError
from loyalty.shared.logging import logger

_UPSERT_DIALECTS = {"postgresql": pg_insert, "sqlite": sqlite_insert}


def _as_utc(value: datetime) -> datetime:
    # SQLite hands timestamps back without tzinfo
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _to_domain(row: Order) -> DomainOrder:
    return DomainOrder(
        number=row.number,
        owner_id=row.user_id,
        status=OrderStatus(row.status),
        accrual=float(row.accrual) if row.accrual is not None else None,
        uploaded_at=_as_utc(row.uploaded_at),
    )


class SqlAlchemyOrderRepository(OrderRepository):
    def __init__(
        self,
        session_factory: Callable[[], Session],
        *,
        resilience: ResilienceConfig,
    ) -> None:
        self._session_factory = session_factory
        self._resilience = resilience

    def _insert_if_absent(self, session: Session, user_id: int, number: str) -> bool:
        values = {
            "number": number,
            "user_id": user_id,
            "status": OrderStatus.NEW.value,
            "uploaded_at": datetime.now(UTC),
        }
        upsert = _UPSERT_DIALECTS.get(session.get_bind().dialect.name)
        if upsert is not None:
            stmt = upsert(Order).values(**values).on_conflict_do_nothing(index_elements=["number"])
            return session.execute(stmt).rowcount == 1

        try:
            with session.begin_nested():
                session.execute(insert(Order).values(**values))
        except IntegrityError:
            return False
        return True

    def create_order_if_absent(self, user_id: int, number: str) -> OrderClaim:
        """Insert ``number`` for ``user_id`` unless it exists; report the owner either way.

        Not retried: a second attempt could find the row written by the first
        one and report it as already present.
        """
        try:
            with unit_of_work_scope(self._session_factory) as session:
                if self._insert_if_absent(session, user_id, number):
                    return OrderClaim(created=True, owner_id=user_id)
                owner_id = session.execute(
                    select(Order.user_id).where(Order.number == number).limit(1)
                ).scalar_one()
                return OrderClaim(created=False, owner_id=owner_id)
        except SQLAlchemyError as exc:
            logger.error(f"orders.create: storage failure {type(exc).__name__}")
            raise StorageError("create_order_if_absent") from exc

    def list_orders_by_user(self, user_id: int) -> Sequence[DomainOrder]:
        def _fetch() -> list[DomainOrder]:
            with unit_of_work_scope(self._session_factory) as session:
                rows = session.execute(
                    select(Order)
                    .where(Order.user_id == user_id)
                    .order_by(Order.uploaded_at.desc(), Order.id.desc())
                ).scalars().all()
                return [_to_domain(row) for row in rows]

        try:
            return retry_read(_fetch, config=self._resilience)
        except SQLAlchemyError as exc:
            logger.error(f"orders.list: storage failure {type(exc).__name__}")
            raise StorageError("list_orders_by_user") from exc
