"""Monitoring helpers and Prometheus metrics exporters."""
from __future__ import annotations

from typing import Final

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

_HTTP_REQUEST_TOTAL: Final = Counter(
    "klvscope_http_requests_total",
    "Total HTTP requests",
    labelnames=("method", "route", "status"),
)
_HTTP_REQUEST_LATENCY: Final = Histogram(
    "klvscope_http_request_duration_seconds",
    "Latency of HTTP requests",
    labelnames=("method", "route"),
    buckets=(0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1),
)
_SERVICE_ERRORS_TOTAL: Final = Counter(
    "klvscope_service_errors_total",
    "Service-level errors by code",
    labelnames=("code", "route"),
)
_BUFFERS_PARSED_TOTAL: Final = Counter(
    "klvscope_buffers_parsed_total",
    "KLV buffers parsed, by outcome",
    labelnames=("outcome",),
)
_PARSE_ERRORS_TOTAL: Final = Counter(
    "klvscope_parse_errors_total",
    "Structural parse errors by kind",
    labelnames=("kind",),
)

_ERROR_KINDS: Final = (
    ("Incomplete entry", "incomplete_entry"),
    ("Invalid format", "invalid_format"),
    ("Incomplete value", "incomplete_value"),
)


def observe_request(method: str, route: str, status_code: int, duration_ms: float) -> None:
    _HTTP_REQUEST_TOTAL.labels(method=method, route=route, status=str(status_code)).inc()
    _HTTP_REQUEST_LATENCY.labels(method=method, route=route).observe(duration_ms / 1000)


def record_service_error(code: str, route: str) -> None:
    _SERVICE_ERRORS_TOTAL.labels(code=code, route=route).inc()


def error_kind(message: str) -> str:
    for prefix, kind in _ERROR_KINDS:
        if message.startswith(prefix):
            return kind
    return "other"


def record_parse(errors: list[str]) -> None:
    _BUFFERS_PARSED_TOTAL.labels(outcome="invalid" if errors else "valid").inc()
    for message in errors:
        _PARSE_ERRORS_TOTAL.labels(kind=error_kind(message)).inc()


def metrics_payload() -> tuple[bytes, str]:
    """Return Prometheus exposition payload and content type."""

    return generate_latest(), CONTENT_TYPE_LATEST
