# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from loyalty.application.use_cases.users.login_user import LoginUserUseCase
from loyalty.application.use_cases.users.register_user import RegisterUserUseCase
from loyalty.interfaces.http.dto.auth import (
    AuthSuccessDTO,
    LoginRequestDTO,
    RegisterRequestDTO,
)
from loyalty.shared.config import SecurityConfig
from loyalty.shared.errors.validation import raise_validation_error
from loyalty.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        security: SecurityConfig,
        token_ttl: int,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._security = security
        self._token_ttl = token_ttl

    def _with_session_cookie(self, token: str) -> Response:
        response = jsonify(AuthSuccessDTO().model_dump())
        response.set_cookie(
            self._security.auth_cookie_name,
            token,
            path="/",
            httponly=True,
            samesite=self._security.cookie_samesite,
            secure=self._security.cookie_secure or request.is_secure,
            max_age=self._token_ttl,
        )
        return response

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True))
        except ValidationError as exc:
            raise_validation_error(exc)

        user_id, token = self._register_use_case.execute(dto.login, dto.password)

        logger.info(f"auth.register: ok user_id={user_id}")
        return self._with_session_cookie(token), 200

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True))
        except ValidationError as exc:
            raise_validation_error(exc)

        token = self._login_use_case.execute(dto.login, dto.password)

        logger.info(f"auth.login: ok login={dto.login}")
        return self._with_session_cookie(token), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/user")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
