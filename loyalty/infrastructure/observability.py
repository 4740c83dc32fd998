# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

REQUEST_LATENCY = Histogram(
    "loyalty_request_latency_seconds",
    "Request latency",
    labelnames=("endpoint",),
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5),
)
REQUEST_COUNTER = Counter(
    "loyalty_requests_total",
    "Number of processed requests",
    labelnames=("endpoint", "status"),
)
ORDER_SUBMISSIONS = Counter(
    "loyalty_order_submissions_total",
    "Order submissions by outcome",
    labelnames=("outcome",),
)

_enabled = True


def configure_metrics(enabled: bool) -> None:
    global _enabled
    _enabled = enabled


def metrics_enabled() -> bool:
    return _enabled


def record_order_submission(outcome: str) -> None:
    if _enabled:
        ORDER_SUBMISSIONS.labels(outcome=outcome).inc()


def render_latest() -> tuple[bytes, str]:
    return generate_latest(), CONTENT_TYPE_LATEST


__all__ = [
    "ORDER_SUBMISSIONS",
    "REQUEST_COUNTER",
    "REQUEST_LATENCY",
    "configure_metrics",
    "metrics_enabled",
    "record_order_submission",
    "render_latest",
]
