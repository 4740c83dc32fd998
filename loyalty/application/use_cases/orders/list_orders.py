# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from loyalty.domain.orders.entities import Order
from loyalty.domain.orders.repositories import OrderRepository


class ListUserOrdersUseCase:
    def __init__(self, *, orders: OrderRepository) -> None:
        self._orders = orders

    def execute(self, user_id: int) -> Sequence[Order]:
        """Orders of one user, most recently uploaded first; empty when none."""
        return list(self._orders.list_orders_by_user(user_id))
