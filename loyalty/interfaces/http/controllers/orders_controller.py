# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from loyalty.application.use_cases.orders.list_orders import ListUserOrdersUseCase
from loyalty.application.use_cases.orders.submit_order import SubmitOrderUseCase
from loyalty.domain.orders.entities import SubmitOrderResult
from loyalty.interfaces.http.auth import RequestAuthenticator, current_user_id
from loyalty.interfaces.http.dto.orders import OrderDTO, OrderSubmittedDTO
from loyalty.shared.errors import UnsupportedContentTypeError

TEXT_PLAIN = "text/plain"

_STATUS_BY_RESULT = {
    SubmitOrderResult.ACCEPTED: 202,
    SubmitOrderResult.ALREADY_UPLOADED: 200,
}


class OrdersController:
    def __init__(
        self,
        *,
        submit_use_case: SubmitOrderUseCase,
        list_use_case: ListUserOrdersUseCase,
        authenticator: RequestAuthenticator,
    ) -> None:
        self._submit_use_case = submit_use_case
        self._list_use_case = list_use_case
        self._authenticator = authenticator

    def upload(self) -> tuple[Response, int]:
        # mimetype drops parameters such as "; charset=utf-8"
        if request.mimetype != TEXT_PLAIN:
            raise UnsupportedContentTypeError(TEXT_PLAIN)

        raw_number = request.get_data(as_text=True)
        result = self._submit_use_case.execute(current_user_id(), raw_number)

        payload = OrderSubmittedDTO(number=raw_number.strip(), result=result)
        return jsonify(payload.model_dump(mode="json")), _STATUS_BY_RESULT[result]

    def list_orders(self) -> tuple[Response, int]:
        orders = self._list_use_case.execute(current_user_id())
        if not orders:
            return Response(status=204), 204
        return jsonify([OrderDTO.from_domain(order).to_json() for order in orders]), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("orders", __name__, url_prefix="/api/user")
        required = self._authenticator.required
        bp.add_url_rule(
            "/orders", endpoint="upload", view_func=required(self.upload), methods=["POST"]
        )
        bp.add_url_rule(
            "/orders", endpoint="list", view_func=required(self.list_orders), methods=["GET"]
        )
        return bp
