# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Callable
from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from loyalty.application.services.password_hashing import WerkzeugPasswordHasher
from loyalty.application.services.token_codec import HmacTokenCodec
from loyalty.application.use_cases.orders.list_orders import ListUserOrdersUseCase
from loyalty.application.use_cases.orders.submit_order import SubmitOrderUseCase
from loyalty.application.use_cases.users.login_user import LoginUserUseCase
from loyalty.application.use_cases.users.register_user import RegisterUserUseCase
from loyalty.infrastructure.db import create_db_engine, create_session_factory
from loyalty.infrastructure.repositories.orders.sqlalchemy_order_repository import (
    SqlAlchemyOrderRepository,
)
from loyalty.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from loyalty.interfaces.http.auth import RequestAuthenticator
from loyalty.interfaces.http.controllers.auth_controller import AuthController
from loyalty.interfaces.http.controllers.misc_controller import MiscController
from loyalty.interfaces.http.controllers.orders_controller import OrdersController
from loyalty.shared.config import AppConfig


class Container:
    def __init__(
        self,
        config: AppConfig,
        *,
        clock: Callable[[], float] = time.time,
        password_method: str = "scrypt",
    ) -> None:
        self.config = config
        self._clock = clock
        self._password_method = password_method

    @cached_property
    def engine(self) -> Engine:
        return create_db_engine(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return create_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self._password_method)

    @cached_property
    def token_codec(self) -> HmacTokenCodec:
        return HmacTokenCodec(self.config.secret_key)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(
            self.session_factory, resilience=self.config.resilience
        )

    @cached_property
    def order_repository(self) -> SqlAlchemyOrderRepository:
        return SqlAlchemyOrderRepository(
            self.session_factory, resilience=self.config.resilience
        )

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.token_codec,
            password_hasher=self.password_hasher,
            token_ttl=self.config.token_ttl,
            clock=self._clock,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_codec,
            password_hasher=self.password_hasher,
            token_ttl=self.config.token_ttl,
            clock=self._clock,
        )

    @cached_property
    def submit_order_use_case(self) -> SubmitOrderUseCase:
        return SubmitOrderUseCase(orders=self.order_repository)

    @cached_property
    def list_orders_use_case(self) -> ListUserOrdersUseCase:
        return ListUserOrdersUseCase(orders=self.order_repository)

    @cached_property
    def authenticator(self) -> RequestAuthenticator:
        return RequestAuthenticator(
            tokens=self.token_codec,
            cookie_name=self.config.security.auth_cookie_name,
            clock=self._clock,
        )

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            security=self.config.security,
            token_ttl=self.config.token_ttl,
        )

    @cached_property
    def orders_controller(self) -> OrdersController:
        return OrdersController(
            submit_use_case=self.submit_order_use_case,
            list_use_case=self.list_orders_use_case,
            authenticator=self.authenticator,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(engine=self.engine)
