# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from loyalty.domain.users.entities import User as DomainUser
from loyalty.domain.users.exceptions import UserAlreadyExistsError, UserNotFoundError
from loyalty.domain.users.repositories import UserRepository
from loyalty.infrastructure.db.models import User
from loyalty.infrastructure.resilience import retry_read
from loyalty.infrastructure.unit_of_work import unit_of_work_scope
from loyalty.shared.config import ResilienceConfig
from loyalty.shared.errors import StorageError
from loyalty.shared.logging import logger


class SqlAlchemyUserRepository(UserRepository):
    def __init__(
        self,
        session_factory: Callable[[], Session],
        *,
        resilience: ResilienceConfig,
    ) -> None:
        self._session_factory = session_factory
        self._resilience = resilience

    def create_user(self, login: str, password_hash: str) -> int:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(login=login, password_hash=password_hash)
                session.add(row)
                session.flush()
                user_id = row.id
        except IntegrityError as exc:
            raise UserAlreadyExistsError() from exc
        except SQLAlchemyError as exc:
            logger.error(f"users.create: storage failure {type(exc).__name__}")
            raise StorageError("create_user") from exc
        return user_id

    def get_user_by_login(self, login: str) -> DomainUser:
        def _fetch() -> DomainUser | None:
            with unit_of_work_scope(self._session_factory) as session:
                row = session.execute(
                    select(User).where(User.login == login).limit(1)
                ).scalar_one_or_none()
                if row is None:
                    return None
                return DomainUser(id=row.id, login=row.login, password_hash=row.password_hash)

        try:
            user = retry_read(_fetch, config=self._resilience)
        except SQLAlchemyError as exc:
            logger.error(f"users.get: storage failure {type(exc).__name__}")
            raise StorageError("get_user_by_login") from exc
        if user is None:
            raise UserNotFoundError()
        return user
