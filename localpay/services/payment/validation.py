"""Presence checks for method-specific payment details.

Only non-emptiness is checked: no IFSC format, Luhn or expiry parsing. The
first failing rule for the selected method decides the single message.
"""

from dataclasses import dataclass

from localpay.services.payment.schemas import PaymentMethod, PaymentRequest

UPI_ID_REQUIRED = "UPI ID is required"
BANK_DETAILS_REQUIRED = "All bank details are required"
CARD_DETAILS_REQUIRED = "All card details are required"
INVALID_METHOD = "Invalid payment method"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one request; `message` is set only when invalid."""

    message: str | None = None

    @property
    def valid(self) -> bool:
        return self.message is None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def invalid(cls, message: str) -> "ValidationResult":
        return cls(message=message)


def validate_payment(req: PaymentRequest) -> ValidationResult:
    """Check the fields required by `req.method`; other methods' fields are ignored."""

    method = PaymentMethod.parse(req.method)
    if method is PaymentMethod.UPI:
        if not req.upi_id:
            return ValidationResult.invalid(UPI_ID_REQUIRED)
    elif method is PaymentMethod.BANK:
        if not all((req.account_number, req.ifsc_code, req.account_name)):
            return ValidationResult.invalid(BANK_DETAILS_REQUIRED)
    elif method is PaymentMethod.CARD:
        if not all((req.card_number, req.expiry_date, req.name_on_card)):
            return ValidationResult.invalid(CARD_DETAILS_REQUIRED)
    else:
        return ValidationResult.invalid(INVALID_METHOD)
    return ValidationResult.ok()
