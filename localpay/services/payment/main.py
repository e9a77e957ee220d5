"""HTTP surface for the local payment simulator.

Decodes the checkout payload, hands it to `PaymentProcessor`, and transmits
the JSON outcome. CORS is open to the configured development origins only.
"""

from time import perf_counter
from uuid import uuid4

import uvicorn
from fastapi import FastAPI, Header, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from localpay.common.config import settings
from localpay.common.logging import configure_logging, logger, trace_id_ctx
from localpay.common.metrics import (
    http_request_duration_seconds,
    http_requests_total,
    metrics_response,
    payment_failure_total,
)
from localpay.common.startup import log_startup_config
from localpay.common.tracing import instrument_app, setup_tracing
from localpay.services.payment.schemas import PaymentRequest, PaymentResponse
from localpay.services.payment.service import PaymentProcessor

INVALID_REQUEST_FORMAT = "Invalid request format"

configure_logging()
setup_tracing(settings.service_name)
log_startup_config(settings)
processor = PaymentProcessor(
    delay_seconds=settings.processing_delay_ms / 1000,
    service_name=settings.service_name,
)

app = FastAPI(title="LocalPay Payment Server")
instrument_app(app)


@app.middleware("http")
async def metrics_middleware(request: Request, call_next):
    """Record request count and latency for every HTTP call."""

    start = perf_counter()
    route = request.url.path
    method = request.method
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        route_obj = request.scope.get("route")
        if route_obj is not None and getattr(route_obj, "path", None):
            route = route_obj.path
        return response
    finally:
        elapsed = max(0.0, perf_counter() - start)
        http_request_duration_seconds.labels(
            service=settings.service_name,
            route=route,
            method=method,
        ).observe(elapsed)
        http_requests_total.labels(
            service=settings.service_name,
            route=route,
            method=method,
            status_code=str(status_code),
        ).inc()


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    allow_credentials=True,
)


def _respond(resp: PaymentResponse) -> JSONResponse:
    return JSONResponse(status_code=200 if resp.success else 400, content=resp.to_wire())


@app.post("/api/local-payment")
async def local_payment(
    request: Request,
    x_correlation_id: str | None = Header(default=None),
):
    """Process one payment submission.

    Bodies that do not decode into a `PaymentRequest` are rejected up front,
    before the simulated processing delay.
    """

    trace_id_ctx.set(x_correlation_id or str(uuid4()))
    raw = await request.body()
    try:
        req = PaymentRequest.model_validate_json(raw)
    except ValidationError as exc:
        logger.warning("malformed payment request errors=%s", exc.error_count())
        payment_failure_total.labels(service=settings.service_name, reason=INVALID_REQUEST_FORMAT).inc()
        return _respond(PaymentResponse.failed(INVALID_REQUEST_FORMAT))

    return _respond(await processor.process(req))


@app.get("/health", response_class=PlainTextResponse)
def health():
    """Liveness probe used by the checkout page before submitting."""

    return "Server is running"


@app.get("/metrics")
def metrics():
    """Prometheus scrape endpoint."""

    return metrics_response()


def run() -> None:
    """Serve the app on the configured host and port."""

    logger.info("Server starting on port %s...", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
