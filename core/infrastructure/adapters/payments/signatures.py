"""HMAC-SHA256 signatures used by the payment gateway."""
import hashlib
import hmac


def hmac_sha256_hex(secret: str, message: bytes) -> str:
    """Hex digest of HMAC-SHA256(message, secret)."""
    return hmac.new(secret.encode(), message, hashlib.sha256).hexdigest()


def payment_signature(secret: str, gateway_order_id: str, gateway_payment_id: str) -> str:
    """Signature over `<order_id>|<payment_id>` sent back to the client after checkout."""
    return hmac_sha256_hex(secret, f"{gateway_order_id}|{gateway_payment_id}".encode())


def signatures_match(expected: str, received: str) -> bool:
    """Constant-time comparison."""
    if not received:
        return False
    return hmac.compare_digest(expected.encode(), received.encode())
