"""Prometheus metric definitions for the payment server."""

from prometheus_client import Counter, Histogram, generate_latest
from starlette.responses import Response


payment_requests_total = Counter(
    "payment_requests_total",
    "Total decoded payment requests",
    ["service", "method"],
)
payment_success_total = Counter(
    "payment_success_total",
    "Total successful payments",
    ["service", "method"],
)
payment_failure_total = Counter(
    "payment_failure_total",
    "Total rejected payments",
    ["service", "reason"],
)
payment_latency_seconds = Histogram(
    "payment_latency_seconds",
    "Payment processing latency seconds, simulated delay included",
    ["service"],
    buckets=(0.1, 0.5, 1.0, 1.5, 2.0, 2.5, 5.0, 10.0),
)
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["service", "route", "method", "status_code"],
)
http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration seconds",
    ["service", "route", "method"],
)


def metrics_response() -> Response:
    """Expose all registered Prometheus metrics in text format."""

    return Response(content=generate_latest(), media_type="text/plain")
