from __future__ import annotations

from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from loyalty.application.use_cases.users.login_user import LoginUserUseCase
from loyalty.application.use_cases.users.register_user import RegisterUserUseCase
from loyalty.domain.users.exceptions import InvalidCredentialsError, UserAlreadyExistsError
from loyalty.interfaces.http.controllers.auth_controller import AuthController
from loyalty.shared.config import SecurityConfig
from loyalty.shared.middleware.error_handler import configure_error_handling


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def _mount(flask_app: Flask, *, register=None, login=None) -> None:
    controller = AuthController(
        register_use_case=cast(RegisterUserUseCase, register or MagicMock()),
        login_use_case=cast(LoginUserUseCase, login or MagicMock()),
        security=SecurityConfig(),
        token_ttl=3600,
    )
    flask_app.register_blueprint(controller.as_blueprint())


def test_register_endpoint_sets_cookie(flask_app: Flask) -> None:
    register_called: dict[str, tuple[str, str]] = {}

    class StubRegister:
        def execute(self, login: str, password: str) -> tuple[int, str]:
            register_called["args"] = (login, password)
            return 1, "token123"

    _mount(flask_app, register=StubRegister())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/user/register", json={"login": " alice ", "password": "s3cret!"}
        )

    assert response.status_code == 200
    assert response.get_json() == {"ok": True}
    assert register_called["args"] == ("alice", "s3cret!")
    cookie = response.headers["Set-Cookie"]
    assert cookie.startswith("auth_token=token123")
    assert "HttpOnly" in cookie
    assert "Max-Age=3600" in cookie
    assert "Path=/" in cookie


def test_register_duplicate_login_returns_409(flask_app: Flask) -> None:
    register = MagicMock()
    register.execute.side_effect = UserAlreadyExistsError()
    _mount(flask_app, register=register)

    with flask_app.test_client() as client:
        response = client.post(
            "/api/user/register", json={"login": "alice", "password": "s3cret!"}
        )

    assert response.status_code == 409
    assert response.get_json() == {"error": "user_already_exists"}
    assert "Set-Cookie" not in response.headers


@pytest.mark.parametrize(
    "body",
    [
        {"login": "a"},
        {"password": "s3cret!"},
        {"login": "   ", "password": "s3cret!"},
        {"login": "alice", "password": ""},
        {"login": "alice", "password": "p" * 73},
        {"login": "a" * 65, "password": "s3cret!"},
        ["alice", "s3cret!"],
    ],
)
def test_register_invalid_payload_returns_400(flask_app: Flask, body) -> None:
    register = MagicMock()
    _mount(flask_app, register=register)

    with flask_app.test_client() as client:
        response = client.post("/api/user/register", json=body)

    assert response.status_code == 400
    assert response.get_json()["error"] == "validation_error"
    register.execute.assert_not_called()


def test_register_non_json_body_returns_400(flask_app: Flask) -> None:
    _mount(flask_app)

    with flask_app.test_client() as client:
        response = client.post(
            "/api/user/register", data="login=alice", content_type="text/plain"
        )

    assert response.status_code == 400


def test_login_sets_cookie(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.return_value = "token456"
    _mount(flask_app, login=login)

    with flask_app.test_client() as client:
        response = client.post("/api/user/login", json={"login": "alice", "password": "s3cret!"})

    assert response.status_code == 200
    login.execute.assert_called_once_with("alice", "s3cret!")
    assert response.headers["Set-Cookie"].startswith("auth_token=token456")


def test_login_bad_credentials_returns_401(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    _mount(flask_app, login=login)

    with flask_app.test_client() as client:
        response = client.post("/api/user/login", json={"login": "alice", "password": "nope"})

    assert response.status_code == 401
    assert response.get_json() == {"error": "invalid_credentials"}


def test_login_invalid_payload_returns_400(flask_app: Flask) -> None:
    _mount(flask_app)

    with flask_app.test_client() as client:
        response = client.post("/api/user/login", json={"login": "a"})

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert "password" in payload["context"]["fields"]


@pytest.mark.parametrize(
    "body",
    [
        {"login": "alice", "password": "p" * 73},
        {"login": "a" * 65, "password": "s3cret!"},
    ],
)
def test_login_over_limit_credentials_reach_use_case(flask_app: Flask, body) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    _mount(flask_app, login=login)

    with flask_app.test_client() as client:
        response = client.post("/api/user/login", json=body)

    assert response.status_code == 401
    assert response.get_json() == {"error": "invalid_credentials"}
    login.execute.assert_called_once_with(body["login"], body["password"])
