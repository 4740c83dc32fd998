# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from loyalty.shared.errors.base import DomainError


class OrderNumberFormatError(DomainError):
    code = "order_number_format"
    status = HTTPStatus.BAD_REQUEST


class OrderChecksumError(DomainError):
    code = "order_number_checksum"
    status = HTTPStatus.UNPROCESSABLE_ENTITY


class OrderOwnedByAnotherUserError(DomainError):
    code = "order_owned_by_another_user"
    status = HTTPStatus.CONFLICT
