# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class OrderStatus(str, Enum):
    NEW = "NEW"
    PROCESSING = "PROCESSING"
    INVALID = "INVALID"
    PROCESSED = "PROCESSED"


class SubmitOrderResult(str, Enum):
    ACCEPTED = "accepted"
    ALREADY_UPLOADED = "already_uploaded"


@dataclass(slots=True, frozen=True)
class Order:

    number: str
    owner_id: int
    status: OrderStatus
    accrual: float | None
    uploaded_at: datetime


@dataclass(slots=True, frozen=True)
class OrderClaim:
    """Outcome of a conditional insert: whether a row was created and who owns it."""

    created: bool
    owner_id: int
