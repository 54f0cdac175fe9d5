"""
Bearer token verification.

Tokens are HS256-signed JWTs issued by the storefront auth service. This
service never issues tokens in production; `issue()` exists for fixtures
and local tooling.
"""
import base64
import hashlib
import hmac
import json
import logging
import time
from typing import Any, Dict, Optional

from core.domain.enums import Role
from core.domain.value_objects import Caller


logger = logging.getLogger(__name__)


class BearerTokenVerifier:
    """Resolve a Caller from an HS256 bearer token."""

    ALGORITHM = "HS256"

    def __init__(self, secret: str, leeway_seconds: int = 0):
        self._secret = secret.encode()
        self._leeway = leeway_seconds

    def verify(self, token: str) -> Optional[Caller]:
        """
        Validate the token and return its caller.

        Returns None for any malformed, forged or expired token; the
        HTTP layer turns that into Unauthorized.
        """
        try:
            payload = self.decode(token)
        except ValueError as e:
            logger.warning(f"Rejected bearer token: {e}")
            return None

        user_id = payload.get("sub") or payload.get("id")
        if not user_id:
            logger.warning("Rejected bearer token: missing subject")
            return None

        role = payload.get("role", Role.CUSTOMER.value)
        if role not in {r.value for r in Role}:
            role = Role.CUSTOMER.value

        return Caller(user_id=str(user_id), role=role, email=payload.get("email"))

    def decode(self, token: str) -> Dict[str, Any]:
        """
        Validate and decode a token.

        Checks:
        1. Format (3 parts)
        2. Header alg
        3. Signature
        4. Expiration / not-before

        Raises:
            ValueError: Invalid token
        """
        try:
            header_b64, payload_b64, signature_b64 = token.split(".")
        except ValueError:
            raise ValueError("Malformed token: expected 3 parts")

        header = self._base64_decode_json(header_b64)
        if header.get("alg") != self.ALGORITHM:
            raise ValueError(f"Unsupported alg: {header.get('alg')}")

        message = f"{header_b64}.{payload_b64}".encode()
        expected = hmac.new(self._secret, message, hashlib.sha256).digest()
        if not hmac.compare_digest(expected, self._base64_decode(signature_b64)):
            raise ValueError("Invalid signature")

        payload = self._base64_decode_json(payload_b64)

        now = int(time.time())
        exp = payload.get("exp")
        if exp is not None and exp + self._leeway < now:
            raise ValueError("Token expired")

        nbf = payload.get("nbf", 0)
        if nbf - self._leeway > now:
            raise ValueError("Token not yet valid")

        return payload

    def issue(
        self,
        user_id: str,
        role: str = Role.CUSTOMER.value,
        email: Optional[str] = None,
        ttl_seconds: int = 3600,
    ) -> str:
        """Sign a token for the given identity."""
        now = int(time.time())
        header = {"alg": self.ALGORITHM, "typ": "JWT"}
        payload = {"sub": user_id, "role": role, "iat": now, "exp": now + ttl_seconds}
        if email:
            payload["email"] = email

        header_b64 = self._base64_encode_json(header)
        payload_b64 = self._base64_encode_json(payload)
        message = f"{header_b64}.{payload_b64}".encode()
        signature = hmac.new(self._secret, message, hashlib.sha256).digest()
        return f"{header_b64}.{payload_b64}.{self._base64_encode(signature)}"

    @staticmethod
    def _base64_encode(data: bytes) -> str:
        """URL-safe base64 encode."""
        return base64.urlsafe_b64encode(data).rstrip(b"=").decode()

    @staticmethod
    def _base64_decode(data: str) -> bytes:
        """URL-safe base64 decode."""
        padding = "=" * (-len(data) % 4)
        try:
            return base64.urlsafe_b64decode(data + padding)
        except (ValueError, TypeError):
            raise ValueError("Malformed token: bad base64")

    def _base64_encode_json(self, data: Dict[str, Any]) -> str:
        return self._base64_encode(json.dumps(data, separators=(",", ":")).encode())

    def _base64_decode_json(self, data: str) -> Dict[str, Any]:
        try:
            decoded = json.loads(self._base64_decode(data))
        except json.JSONDecodeError:
            raise ValueError("Malformed token: bad JSON")
        if not isinstance(decoded, dict):
            raise ValueError("Malformed token: expected object")
        return decoded
