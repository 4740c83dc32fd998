# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Idempotent order ingestion."""

from __future__ import annotations

from loyalty.domain.orders.entities import SubmitOrderResult
from loyalty.domain.orders.exceptions import (
    OrderChecksumError,
    OrderNumberFormatError,
    OrderOwnedByAnotherUserError,
)
from loyalty.domain.orders.repositories import OrderRepository
from loyalty.domain.orders.validation import is_all_digits, passes_luhn
from loyalty.infrastructure.observability import record_order_submission
from loyalty.shared.logging import logger


class SubmitOrderUseCase:
    """Accept an order number for a user, or tell who already owns it.

    Order numbers are unique across all users. The decision is taken from a
    single conditional insert in storage: the unique constraint picks the
    winner when two users race for the same number, and the owner is only
    read back on the losing path.
    """

    def __init__(self, *, orders: OrderRepository) -> None:
        self._orders = orders

    def execute(self, user_id: int, raw_number: str) -> SubmitOrderResult:
        number = raw_number.strip()
        if not is_all_digits(number):
            record_order_submission("format")
            raise OrderNumberFormatError()
        if not passes_luhn(number):
            record_order_submission("checksum")
            raise OrderChecksumError()

        claim = self._orders.create_order_if_absent(user_id, number)

        if claim.created:
            logger.info(f"orders.submit: accepted number={number} user_id={user_id}")
            record_order_submission("accepted")
            return SubmitOrderResult.ACCEPTED
        if claim.owner_id == user_id:
            logger.debug(f"orders.submit: repeat number={number} user_id={user_id}")
            record_order_submission("already_uploaded")
            return SubmitOrderResult.ALREADY_UPLOADED

        logger.info(
            f"orders.submit: conflict number={number} user_id={user_id} owner_id={claim.owner_id}"
        )
        record_order_submission("conflict")
        raise OrderOwnedByAnotherUserError()
