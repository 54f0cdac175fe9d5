"""
Mock Payment Gateway Implementation.

In-memory stand-in used when no Razorpay key is configured and in tests.
Signatures are real HMACs over the configured secret, so clients and tests
can produce valid ones.
"""
import logging
import secrets
from typing import Dict, List, Optional

from core.application.interfaces import GatewayOrder, IPaymentGateway
from core.domain.errors import UpstreamUnavailable

from .signatures import hmac_sha256_hex, payment_signature, signatures_match


logger = logging.getLogger(__name__)


class MockPaymentGateway(IPaymentGateway):
    """
    Mock implementation of the payment gateway.

    Records every created order for inspection; `fail_times` makes the next
    N create calls raise UpstreamUnavailable.
    """

    def __init__(
        self,
        key_id: str = "rzp_test_mock",
        key_secret: str = "mock_secret",
        webhook_secret: Optional[str] = None,
    ):
        self.key_id = key_id
        self.key_secret = key_secret
        self.webhook_secret = webhook_secret or key_secret
        self.created_orders: List[Dict] = []
        self.fail_times = 0
        logger.info("MockPaymentGateway initialized")

    async def create_order(
        self,
        amount: int,
        currency: str,
        receipt: str,
        notes: Optional[Dict[str, str]] = None,
    ) -> GatewayOrder:
        if self.fail_times > 0:
            self.fail_times -= 1
            logger.warning(f"[MOCK] Simulated gateway failure for {receipt}")
            raise UpstreamUnavailable("Failed to create payment order")

        gateway_order_id = f"order_{secrets.token_hex(7)}"
        self.created_orders.append({
            "id": gateway_order_id,
            "amount": amount,
            "currency": currency,
            "receipt": receipt,
            "notes": dict(notes or {}),
        })
        logger.info(f"[MOCK] Gateway order created: {gateway_order_id} receipt={receipt} amount={amount}")
        return GatewayOrder(
            gateway_order_id=gateway_order_id,
            amount=amount,
            currency=currency,
            receipt=receipt,
        )

    def sign_payment(self, gateway_order_id: str, gateway_payment_id: str) -> str:
        """Signature the real checkout widget would hand back to the client."""
        return payment_signature(self.key_secret, gateway_order_id, gateway_payment_id)

    def sign_webhook(self, body: bytes) -> str:
        return hmac_sha256_hex(self.webhook_secret, body)

    def verify_payment_signature(
        self,
        gateway_order_id: str,
        gateway_payment_id: str,
        signature: str,
    ) -> bool:
        return signatures_match(self.sign_payment(gateway_order_id, gateway_payment_id), signature)

    def verify_webhook_signature(self, body: bytes, signature: str) -> bool:
        return signatures_match(self.sign_webhook(body), signature)
