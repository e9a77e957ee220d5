"""Simulated payment processing: fixed latency, validation, order issuance."""

import asyncio

from localpay.common.logging import logger, order_id_ctx
from localpay.common.metrics import (
    payment_failure_total,
    payment_latency_seconds,
    payment_requests_total,
    payment_success_total,
)
from localpay.common.state_machine import FAILED, SUCCEEDED, VALIDATING, validate_transition
from localpay.services.payment.order_ids import OrderIdGenerator
from localpay.services.payment.schemas import PaymentMethod, PaymentRequest, PaymentResponse
from localpay.services.payment.validation import validate_payment


class PaymentProcessor:
    """Stands in for a payment gateway; no money moves and nothing is stored."""

    def __init__(
        self,
        order_ids: OrderIdGenerator | None = None,
        delay_seconds: float = 1.5,
        service_name: str = "localpay",
    ) -> None:
        self.order_ids = order_ids if order_ids is not None else OrderIdGenerator()
        self.delay_seconds = delay_seconds
        self.service_name = service_name

    async def process(self, req: PaymentRequest) -> PaymentResponse:
        """Wait the simulated latency, then accept or reject the request.

        The delay applies to every submission, valid or not, and only suspends
        the calling task.
        """

        method_label = req.method if PaymentMethod.parse(req.method) else "unknown"
        payment_requests_total.labels(service=self.service_name, method=method_label).inc()
        with payment_latency_seconds.labels(service=self.service_name).time():
            await asyncio.sleep(self.delay_seconds)

            state = VALIDATING
            result = validate_payment(req)
            if not result.valid:
                validate_transition(state, FAILED)
                payment_failure_total.labels(service=self.service_name, reason=result.message).inc()
                logger.info("payment rejected method=%s reason=%s", req.method, result.message)
                return PaymentResponse.failed(result.message)

            validate_transition(state, SUCCEEDED)
            order_id = self.order_ids.generate()
            order_id_ctx.set(order_id)
            payment_success_total.labels(service=self.service_name, method=method_label).inc()
            logger.info("payment accepted method=%s amount=%s", req.method, req.amount)
            return PaymentResponse.succeeded(order_id, req.method)
