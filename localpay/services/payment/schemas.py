"""Wire schemas for `POST /api/local-payment`.

Field aliases follow the camelCase keys the checkout frontend sends; Python
code uses the snake_case attribute names.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class PaymentMethod(str, Enum):
    """Payment methods the local processor knows how to validate."""

    UPI = "upi"
    BANK = "bank"
    CARD = "card"

    @classmethod
    def parse(cls, raw: str) -> "PaymentMethod | None":
        """Return the matching method, or None for anything unrecognized."""

        try:
            return cls(raw)
        except ValueError:
            return None


class PaymentRequest(BaseModel):
    """Payment submission; `method` selects which detail fields apply.

    `method` stays a plain string so unknown methods decode cleanly and are
    rejected by validation rather than treated as malformed input. Only the
    camelCase wire keys are read. JSON `null`, for a field or for the whole
    body, decodes to the empty value; a wrong JSON type is a decode error.
    """

    model_config = ConfigDict(extra="ignore")

    method: str = ""
    amount: float = Field(default=0.0, strict=True)
    upi_id: str = Field(default="", alias="upiId")
    account_number: str = Field(default="", alias="accountNumber")
    ifsc_code: str = Field(default="", alias="ifscCode")
    account_name: str = Field(default="", alias="accountName")
    card_number: str = Field(default="", alias="cardNumber")
    expiry_date: str = Field(default="", alias="expiryDate")
    name_on_card: str = Field(default="", alias="nameOnCard")

    @model_validator(mode="before")
    @classmethod
    def _null_body(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator(
        "method",
        "upi_id",
        "account_number",
        "ifsc_code",
        "account_name",
        "card_number",
        "expiry_date",
        "name_on_card",
        mode="before",
    )
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("amount", mode="before")
    @classmethod
    def _null_amount(cls, value: Any) -> Any:
        return 0.0 if value is None else value


class PaymentResponse(BaseModel):
    """Either a success with an order id or a failure with an error message."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    order_id: str | None = Field(default=None, alias="orderId")
    message: str | None = None
    error: str | None = None

    @model_validator(mode="after")
    def _one_variant(self) -> "PaymentResponse":
        if self.success:
            if not self.order_id or self.error is not None:
                raise ValueError("successful response needs an orderId and no error")
        elif self.order_id is not None or not self.error:
            raise ValueError("failed response needs an error and no orderId")
        return self

    @classmethod
    def succeeded(cls, order_id: str, method: str) -> "PaymentResponse":
        return cls(success=True, order_id=order_id, message=f"Payment successful via {method}")

    @classmethod
    def failed(cls, error: str) -> "PaymentResponse":
        return cls(success=False, error=error)

    def to_wire(self) -> dict:
        """JSON body with camelCase keys and absent fields omitted."""

        return self.model_dump(by_alias=True, exclude_none=True)
