# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Rendering of errors as JSON responses."""

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from loyalty.shared.logging import logger

from .base import AppError


def error_response(error: AppError) -> tuple[Response, HTTPStatus]:
    return jsonify(error.to_dict()), error.status


def register_error_handler(
    app: Flask,
    *,
    debug_mode: bool = False,
    default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
) -> None:
    """Map ``AppError`` to its own status and anything unexpected to a bare 500.

    Framework errors (404, 405, ...) keep werkzeug's own responses.
    """

    def _where() -> str:
        return f"{request.method} {request.path}"

    @app.errorhandler(AppError)
    def _on_app_error(exc: AppError):
        if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.opt(exception=exc).error(f"{exc.code} on {_where()}")
        else:
            logger.info(f"{exc.code} ({int(exc.status)}) on {_where()}")
        return error_response(exc)

    @app.errorhandler(HTTPException)
    def _on_http_exception(exc: HTTPException):
        return exc

    @app.errorhandler(Exception)
    def _on_unexpected(exc: Exception):
        if debug_mode:
            logger.opt(exception=exc).error(
                f"unhandled {type(exc).__name__} on {_where()} user={getattr(g, 'user_id', None)}"
            )
        else:
            logger.error(f"unhandled {type(exc).__name__} on {_where()}")
        return jsonify({"error": "internal_error"}), default_status
