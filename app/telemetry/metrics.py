"""Prometheus collectors for the greeting service."""

from __future__ import annotations

from typing import Optional

from prometheus_client import Counter, Histogram

# Label used for requests no route matched, so stray paths share one series.
UNMATCHED_ROUTE = "unmatched"

REQUEST_COUNT = Counter(
    "http_requests_total",
    "HTTP requests handled, by method, route template and status",
    ("method", "route", "status"),
)

# Greeting requests finish well under a millisecond; buckets stay fine-grained.
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "Time spent producing the HTTP response",
    ("method", "route"),
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.05, 0.25, 1.0),
)

SERVER_ERRORS = Counter(
    "app_internal_errors_total",
    "Requests that ended in a 5xx response",
    ("method", "route"),
)

GREETINGS_SERVED = Counter(
    "greetings_served_total",
    "Greeting payloads returned by GET /hello",
)


def observe_request(
    method: str,
    route: Optional[str],
    status_code: int,
    duration_seconds: float,
) -> None:
    """Record one finished request.

    ``route`` is the matched route template; ``None`` files the request
    under :data:`UNMATCHED_ROUTE` instead of its raw path.
    """

    labels = {"method": method or "UNKNOWN", "route": route or UNMATCHED_ROUTE}

    REQUEST_COUNT.labels(status=str(status_code), **labels).inc()
    REQUEST_LATENCY.labels(**labels).observe(max(duration_seconds, 0.0))
    if status_code >= 500:
        SERVER_ERRORS.labels(**labels).inc()


def increment_greeting() -> None:
    """Count a greeting payload handed back to a client."""

    GREETINGS_SERVED.inc()
