# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Order, OrderClaim, OrderStatus, SubmitOrderResult
from .exceptions import (
    OrderChecksumError,
    OrderNumberFormatError,
    OrderOwnedByAnotherUserError,
)
from .repositories import OrderRepository
from .validation import is_all_digits, passes_luhn

__all__ = [
    "Order",
    "OrderChecksumError",
    "OrderClaim",
    "OrderNumberFormatError",
    "OrderOwnedByAnotherUserError",
    "OrderRepository",
    "OrderStatus",
    "SubmitOrderResult",
    "is_all_digits",
    "passes_luhn",
]
