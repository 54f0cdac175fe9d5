"""
Razorpay Payment Gateway Implementation.

Creates orders via the Razorpay Orders API and checks payment / webhook
signatures locally.
"""
from typing import Dict, Optional
import asyncio
import logging

import aiohttp

from core.application.interfaces import GatewayOrder, IPaymentGateway
from core.domain.errors import UpstreamUnavailable
from core.infrastructure.retry import RetryPolicy, retry_async
from core.settings.sections import RazorpaySettings

from .signatures import hmac_sha256_hex, payment_signature, signatures_match


logger = logging.getLogger(__name__)


class _RetryableGatewayError(Exception):
    """Transient gateway failure (5xx or 429)."""


# aiohttp signals an expired ClientTimeout with asyncio.TimeoutError
_TRANSIENT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, _RetryableGatewayError)


class RazorpayGateway(IPaymentGateway):
    """
    Razorpay implementation of the payment gateway.

    Order creation is retried on transport errors and 5xx responses. The
    receipt (our order number) is sent with every attempt, so a retried
    request refers to the same merchant order.
    """

    def __init__(self, settings: RazorpaySettings):
        """
        Initialize Razorpay gateway.

        Args:
            settings: Razorpay settings with key pair and call policy
        """
        self.settings = settings
        self.key_id = settings.key_id
        self._key_secret = settings.key_secret
        self._webhook_secret = settings.effective_webhook_secret
        self.orders_url = f"{settings.api_url.rstrip('/')}/orders"
        self.policy = RetryPolicy(
            max_attempts=max(1, settings.max_attempts),
            backoff_seconds=settings.backoff_seconds,
        )
        self.timeout = aiohttp.ClientTimeout(total=settings.timeout_seconds)
        logger.info("RazorpayGateway initialized")

    async def create_order(
        self,
        amount: int,
        currency: str,
        receipt: str,
        notes: Optional[Dict[str, str]] = None,
    ) -> GatewayOrder:
        payload = {
            "amount": amount,
            "currency": currency,
            "receipt": receipt,
            "notes": notes or {},
        }

        try:
            data = await retry_async(
                lambda: self._post_order(payload),
                self.policy,
                retry_on=_TRANSIENT_ERRORS,
                name=f"Razorpay create order {receipt}",
            )
        except _TRANSIENT_ERRORS as e:
            logger.error(f"Razorpay order creation failed for {receipt}: {e!r}")
            raise UpstreamUnavailable("Failed to create payment order") from e

        logger.info(f"Razorpay order created: {data.get('id')} receipt={receipt} amount={amount}")
        return GatewayOrder(
            gateway_order_id=data["id"],
            amount=int(data.get("amount", amount)),
            currency=data.get("currency", currency),
            receipt=data.get("receipt", receipt),
            raw=data,
        )

    async def _post_order(self, payload: dict) -> dict:
        auth = aiohttp.BasicAuth(self.key_id, self._key_secret)
        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            async with session.post(self.orders_url, json=payload, auth=auth) as response:
                if response.status >= 500 or response.status == 429:
                    error_text = await response.text()
                    raise _RetryableGatewayError(f"{response.status} - {error_text}")
                if response.status >= 400:
                    error_text = await response.text()
                    logger.error(f"Razorpay API error: {response.status} - {error_text}")
                    raise UpstreamUnavailable("Failed to create payment order")
                return await response.json()

    def verify_payment_signature(
        self,
        gateway_order_id: str,
        gateway_payment_id: str,
        signature: str,
    ) -> bool:
        expected = payment_signature(self._key_secret, gateway_order_id, gateway_payment_id)
        return signatures_match(expected, signature)

    def verify_webhook_signature(self, body: bytes, signature: str) -> bool:
        if not self._webhook_secret:
            logger.warning("Razorpay webhook secret not configured, rejecting webhook")
            return False
        return signatures_match(hmac_sha256_hex(self._webhook_secret, body), signature)
