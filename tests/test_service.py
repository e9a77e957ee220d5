"""Tests for the payment processor: delay, outcomes, concurrency."""

import asyncio
import random
import re
import time

import pytest

from localpay.services.payment.order_ids import OrderIdGenerator
from localpay.services.payment.schemas import PaymentRequest, PaymentResponse
from localpay.services.payment.service import PaymentProcessor


def _process(processor: PaymentProcessor, payload: dict) -> PaymentResponse:
    return asyncio.run(processor.process(PaymentRequest.model_validate(payload)))


@pytest.fixture
def processor():
    return PaymentProcessor(order_ids=OrderIdGenerator(random.Random(1)), delay_seconds=0)


@pytest.mark.parametrize(
    "payload",
    [
        {"method": "upi", "upiId": "alice@bank", "amount": 100},
        {"method": "bank", "accountNumber": "1", "ifscCode": "I", "accountName": "A", "amount": 5},
        {"method": "card", "cardNumber": "4", "expiryDate": "1/30", "nameOnCard": "A", "amount": 5},
    ],
)
def test_valid_request_succeeds(processor, payload):
    resp = _process(processor, payload)
    assert resp.success
    assert re.fullmatch(r"[a-z0-9]{16}", resp.order_id)
    assert resp.message == f"Payment successful via {payload['method']}"
    assert resp.error is None


def test_invalid_request_fails_without_order_id(processor):
    resp = _process(processor, {"method": "card", "amount": 50})
    assert not resp.success
    assert resp.error == "All card details are required"
    assert resp.order_id is None
    assert resp.to_wire() == {"success": False, "error": "All card details are required"}


def test_unknown_method(processor):
    resp = _process(processor, {"method": "wire", "amount": 10})
    assert resp.to_wire() == {"success": False, "error": "Invalid payment method"}


def test_success_wire_shape(processor):
    body = _process(processor, {"method": "upi", "upiId": "alice@bank", "amount": 100}).to_wire()
    assert set(body) == {"success", "orderId", "message"}
    assert body["success"] is True


def test_default_delay_applies_to_valid_and_invalid():
    """The simulated latency is paid before validation, even for bad input."""

    proc = PaymentProcessor()
    for payload in ({"method": "wire"}, {"method": "upi", "upiId": "alice@bank"}):
        started = time.perf_counter()
        _process(proc, payload)
        assert time.perf_counter() - started >= 1.49


def test_concurrent_requests_do_not_serialize():
    """Delays overlap: five requests take about one delay, not five."""

    proc = PaymentProcessor(delay_seconds=0.3)
    reqs = [PaymentRequest.model_validate({"method": "upi", "upiId": f"user{i}@bank"}) for i in range(5)]

    async def run_all():
        return await asyncio.gather(*(proc.process(r) for r in reqs))

    started = time.perf_counter()
    results = asyncio.run(run_all())
    elapsed = time.perf_counter() - started

    assert all(r.success for r in results)
    assert elapsed < 1.0


def test_response_invariant_enforced():
    with pytest.raises(ValueError):
        PaymentResponse(success=True, message="no id")
    with pytest.raises(ValueError):
        PaymentResponse(success=False, order_id="abc", error="boom")
