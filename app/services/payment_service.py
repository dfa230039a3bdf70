"""Bridge to the Razorpay payment gateway."""

import hashlib
import hmac
import logging
from typing import Any

import httpx

from app.core.errors import PaymentGatewayError

logger = logging.getLogger(__name__)


def sign(order_id: str, payment_id: str, secret: str) -> str:
    """Hex HMAC-SHA256 of ``order_id|payment_id``, as the gateway computes it."""
    message = f"{order_id}|{payment_id}".encode("utf-8")
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).hexdigest()


class PaymentService:
    def __init__(
        self,
        key_id: str,
        key_secret: str,
        api_url: str = "https://api.razorpay.com/v1",
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.key_id = key_id
        self.key_secret = key_secret
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def is_configured(self) -> bool:
        return bool(self.key_id and self.key_secret)

    def create_order(self, amount: int, currency: str, receipt: str | None) -> dict[str, Any]:
        if not self.is_configured():
            raise PaymentGatewayError(
                "Payment gateway is not configured. Set RAZORPAY_KEY_ID and RAZORPAY_KEY_SECRET."
            )

        # the gateway expects the minor unit (paise)
        body = {"amount": amount * 100, "currency": currency, "receipt": receipt}
        logger.info("Creating order: amount=%s currency=%s receipt=%s", amount, currency, receipt)

        try:
            with httpx.Client(
                timeout=self.timeout,
                auth=(self.key_id, self.key_secret),
                transport=self.transport,
            ) as client:
                response = client.post(f"{self.api_url}/orders", json=body)
                response.raise_for_status()
                order = response.json()
        except httpx.HTTPStatusError as exc:
            raise PaymentGatewayError(
                f"Failed to create order: gateway returned {exc.response.status_code}"
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise PaymentGatewayError(f"Failed to create order: {exc}") from exc

        logger.info("Order created: %s", order.get("id"))
        return order

    def verify(self, order_id: str | None, payment_id: str | None, signature: str | None) -> bool:
        if not (order_id and payment_id and signature):
            return False
        try:
            expected = sign(order_id, payment_id, self.key_secret)
            return expected == signature.lower()
        except Exception as exc:
            logger.warning("Error verifying payment: %s", exc)
            return False
