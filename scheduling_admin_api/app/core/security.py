"""
Bearer token verification for API requests.

The identity provider issues JSON Web Tokens signed with HMAC‑SHA256
and a secret shared with this API (``settings.auth_secret``).  The
``sub`` claim is the caller identity; it is the primary key of the
caller's profile and the owner of every service and availability row
the caller writes.

Tokens are verified with the standard library (base64url + HMAC); no
session state is kept between requests.  ``create_access_token`` mints
tokens with the same format and is used by ``create_token.py`` and the
test suite.
"""

import base64
import binascii
import hashlib
import hmac
import json
import time
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC‑SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(data: Dict[str, Any], expires_delta: Optional[int] = None) -> str:
    """Create a signed token with the given claims.

    The claims are extended with ``exp`` (UNIX timestamp).  Clients send
    the result as ``Authorization: Bearer <token>``.

    Parameters
    ----------
    data : dict
        Claims to embed; ``sub`` must hold the caller identity.
    expires_delta : Optional[int]
        Lifetime in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60``.
    """
    to_encode = dict(data)
    exp_seconds = expires_delta if expires_delta is not None else settings.access_token_expire_minutes * 60
    to_encode["exp"] = int(time.time()) + exp_seconds
    header = {"alg": "HS256", "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, settings.auth_secret))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify a token and return its claims, or ``None`` if it is invalid.

    A token is rejected when it does not have three parts, its header
    names an algorithm other than HS256, its signature does not match,
    it carries no ``exp`` or an expired one, or it has no string ``sub``.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    try:
        header = json.loads(_b64_url_decode(header_b64))
        actual_sig = _b64_url_decode(signature_b64)
        payload = json.loads(_b64_url_decode(payload_b64))
    except (binascii.Error, ValueError):
        # ValueError covers JSON and UTF‑8 decoding errors
        return None
    if not isinstance(header, dict) or header.get("alg") != "HS256":
        return None
    expected_sig = _sign(f"{header_b64}.{payload_b64}".encode("utf-8"), settings.auth_secret)
    if not hmac.compare_digest(expected_sig, actual_sig):
        return None
    if not isinstance(payload, dict):
        return None
    exp = payload.get("exp")
    if not isinstance(exp, (int, float)) or exp < time.time():
        return None
    sub = payload.get("sub")
    if not isinstance(sub, str) or not sub:
        return None
    return payload


security = HTTPBearer(auto_error=False)


def get_current_user(credentials: HTTPAuthorizationCredentials = Depends(security)) -> Dict[str, Any]:
    """Dependency that resolves the caller identity.

    Raises HTTP 401 when the ``Authorization`` header is missing or the
    token is invalid or expired.  On success returns the token claims
    with ``user_id`` set to the ``sub`` claim.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload["user_id"] = payload["sub"]
    return payload
