"""Application layer interfaces."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class GatewayOrder:
    """Order created on the payment gateway side."""

    gateway_order_id: str
    amount: int
    currency: str
    receipt: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, compare=False)


class IPaymentGateway(ABC):
    """
    Interface for payment gateway operations.

    This interface defines the contract for the external payment provider,
    allowing the application layer to create payment orders and check
    signatures without depending on a specific provider.
    """

    key_id: str = ""

    @abstractmethod
    async def create_order(
        self,
        amount: int,
        currency: str,
        receipt: str,
        notes: Optional[Dict[str, str]] = None,
    ) -> GatewayOrder:
        """
        Create a payment order on the gateway.

        Args:
            amount: Amount in minor units (paise for INR)
            currency: ISO currency code
            receipt: Merchant reference (our order number); makes retries idempotent
            notes: Free-form key/value metadata

        Returns:
            GatewayOrder with the gateway's order id

        Raises:
            UpstreamUnavailable: If the gateway cannot be reached or rejects the request
        """
        pass

    @abstractmethod
    def verify_payment_signature(
        self,
        gateway_order_id: str,
        gateway_payment_id: str,
        signature: str,
    ) -> bool:
        """
        Check the signature returned to the client after checkout.

        Args:
            gateway_order_id: Gateway order id
            gateway_payment_id: Gateway payment id
            signature: Hex signature supplied by the client

        Returns:
            True if the signature matches
        """
        pass

    @abstractmethod
    def verify_webhook_signature(self, body: bytes, signature: str) -> bool:
        """
        Check a webhook body against its signature header.

        Args:
            body: Raw request body, exactly as received
            signature: Value of the signature header

        Returns:
            True if the signature matches
        """
        pass


__all__ = ["GatewayOrder", "IPaymentGateway"]
