"""
JWT token creation and verification.

Tokens are compact HS256 JWS strings: base64url header, payload and
HMAC-SHA256 signature joined by dots. The secret and lifetime come from
settings (``JWT_SECRET``, ``JWT_EXPIRY_SECONDS``) and are bound once at
startup.

Tokens are pure bearer credentials with no server-side record, so a leaked
token stays valid until ``exp``.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json
import time
from typing import Any, Dict, Optional

from auth.errors import InvalidToken
from auth.schemas import TokenClaims

_HEADER = {"alg": "HS256", "typ": "JWT"}


def _b64encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64decode(segment: str) -> bytes:
    padding = "=" * (-len(segment) % 4)
    return base64.urlsafe_b64decode(segment + padding)


def _json_segment(obj: Dict[str, Any]) -> str:
    return _b64encode(json.dumps(obj, separators=(",", ":"), sort_keys=True).encode())


class TokenIssuer:
    """Signs and verifies identity tokens with a process-wide secret."""

    def __init__(self, secret: str, expiry_seconds: int) -> None:
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        if expiry_seconds <= 0:
            raise ValueError("Token expiry must be positive")
        self._secret = secret.encode()
        self.expiry_seconds = expiry_seconds

    def _sign(self, signing_input: str) -> str:
        digest = hmac.new(self._secret, signing_input.encode(), hashlib.sha256).digest()
        return _b64encode(digest)

    def issue(self, claims: Dict[str, Any], *, now: Optional[float] = None) -> str:
        """Create a signed token carrying ``claims`` plus ``iat``/``exp``."""
        issued_at = int(time.time() if now is None else now)
        payload = dict(claims)
        payload["iat"] = issued_at
        payload["exp"] = issued_at + self.expiry_seconds
        signing_input = _json_segment(_HEADER) + "." + _json_segment(payload)
        return signing_input + "." + self._sign(signing_input)

    def verify(self, token: str, *, now: Optional[float] = None) -> TokenClaims:
        """
        Verify ``token`` and return its claims.

        Raises ``InvalidToken`` on a malformed token, a bad signature or
        once the current time has reached ``exp``.
        """
        try:
            header_b64, payload_b64, signature = token.split(".")
        except (ValueError, AttributeError) as exc:
            raise InvalidToken() from exc

        expected = self._sign(header_b64 + "." + payload_b64)
        if not hmac.compare_digest(signature.encode(), expected.encode()):
            raise InvalidToken()

        try:
            header = json.loads(_b64decode(header_b64))
            payload = json.loads(_b64decode(payload_b64))
        except (ValueError, binascii.Error) as exc:
            raise InvalidToken() from exc

        if not isinstance(header, dict) or header.get("alg") != _HEADER["alg"]:
            raise InvalidToken()
        if not isinstance(payload, dict):
            raise InvalidToken()

        exp = payload.get("exp")
        if not isinstance(exp, int) or isinstance(exp, bool):
            raise InvalidToken()
        current = time.time() if now is None else now
        if current >= exp:
            raise InvalidToken()

        try:
            return TokenClaims.model_validate(payload)
        except ValueError as exc:
            raise InvalidToken() from exc
