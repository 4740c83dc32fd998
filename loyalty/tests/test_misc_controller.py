from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask import Flask
from sqlalchemy import create_engine

from loyalty.infrastructure.observability import configure_metrics
from loyalty.interfaces.http.controllers.misc_controller import MiscController


@pytest.fixture()
def metrics_toggle() -> Iterator[None]:
    yield
    configure_metrics(True)


def _client(engine):
    app = Flask(__name__)
    app.register_blueprint(MiscController(engine=engine).as_blueprint())
    return app.test_client()


def test_health_ok() -> None:
    engine = create_engine("sqlite://")

    response = _client(engine).get("/api/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "database": "ok"}
    engine.dispose()


def test_health_reports_unreachable_database(tmp_path) -> None:
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'dir' / 'db.sqlite'}")

    response = _client(engine).get("/api/health")

    assert response.status_code == 503
    assert response.get_json() == {"ok": False, "database": "error"}
    engine.dispose()


def test_metrics_exposition() -> None:
    engine = create_engine("sqlite://")
    configure_metrics(True)

    response = _client(engine).get("/metrics")

    assert response.status_code == 200
    assert response.content_type.startswith("text/plain")
    assert b"loyalty_order_submissions_total" in response.data


def test_metrics_can_be_disabled(metrics_toggle: None) -> None:
    configure_metrics(False)

    response = _client(create_engine("sqlite://")).get("/metrics")

    assert response.status_code == 404
