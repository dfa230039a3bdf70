from pydantic import Field

from app.schemas.base import CamelModel


class OrderCreate(CamelModel):
    amount: int = Field(gt=0)
    currency: str = "INR"
    receipt: str | None = None


class PaymentVerification(CamelModel):
    # Razorpay callback field names are snake_case already
    razorpay_order_id: str | None = Field(default=None, alias="razorpay_order_id")
    razorpay_payment_id: str | None = Field(default=None, alias="razorpay_payment_id")
    razorpay_signature: str | None = Field(default=None, alias="razorpay_signature")


class PaymentVerificationResult(CamelModel):
    verified: bool
    message: str
