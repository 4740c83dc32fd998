# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.orders.list_orders import ListUserOrdersUseCase
from .use_cases.orders.submit_order import SubmitOrderUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase

__all__ = [
    "ListUserOrdersUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "SubmitOrderUseCase",
]
