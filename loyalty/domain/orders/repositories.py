# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Order, OrderClaim


class OrderRepository(Protocol):
    def create_order_if_absent(self, user_id: int, number: str) -> OrderClaim: ...
    def list_orders_by_user(self, user_id: int) -> Sequence[Order]: ...
