"""
Security utilities for the course platform.

Handles credential (JWT) issuance and verification. A credential carries a
single ``email`` claim and expires a fixed time after issuance; there is no
refresh and no revocation.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping, Optional, Union
from jose import ExpiredSignatureError, JWTError, jwt

from .config import settings


@dataclass(frozen=True)
class Authorized:
    """Credential accepted; ``email`` is the authenticated identity."""

    email: str


@dataclass(frozen=True)
class Unauthorized:
    """Credential rejected for ``reason``."""

    reason: str


AuthResult = Union[Authorized, Unauthorized]


def create_access_token(
    user: Mapping[str, Any],
    expires_delta: Optional[timedelta] = None,
    secret_key: Optional[str] = None
) -> str:
    """
    Create a JWT access token for a user.

    Only the ``email`` field of the user is read. The issuer does not check
    that it is present; inbound bodies are validated before reaching here.

    Args:
        user: User-like mapping
        expires_delta: Optional custom lifetime, defaults to
            ``ACCESS_TOKEN_EXPIRE_MINUTES``
        secret_key: Optional signing key, defaults to ``SECRET_KEY``

    Returns:
        str: The encoded JWT token
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "email": user.get("email"),
        "exp": datetime.now(timezone.utc) + expires_delta,
    }

    return jwt.encode(
        to_encode,
        secret_key or settings.SECRET_KEY,
        algorithm=settings.ALGORITHM
    )


def decode_token(token: str, secret_key: Optional[str] = None) -> Dict[str, Any]:
    """
    Decode a JWT token, checking signature and expiry.

    Raises:
        ExpiredSignatureError: The token's expiry has passed
        JWTError: The signature does not verify or the token is malformed
    """
    return jwt.decode(
        token,
        secret_key or settings.SECRET_KEY,
        algorithms=[settings.ALGORITHM]
    )


def verify_token(token: str, secret_key: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """
    Verify and decode a JWT token.

    Args:
        token: The JWT token to verify
        secret_key: Optional verification key, defaults to ``SECRET_KEY``

    Returns:
        Optional[Dict[str, Any]]: The decoded token payload if valid, None otherwise
    """
    try:
        return decode_token(token, secret_key)
    except JWTError:
        return None


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Pull the credential out of an ``Authorization: Bearer <token>`` header.

    The header is split on whitespace and the second part is taken. Returns
    None when there is no second part.
    """
    parts = (authorization or "").split()
    if len(parts) < 2:
        return None
    return parts[1]


def authenticate(authorization: Optional[str], secret_key: Optional[str] = None) -> AuthResult:
    """
    Check an ``Authorization`` header value and resolve the caller's identity.

    Args:
        authorization: Raw header value, or None when the header is absent
        secret_key: Optional verification key, defaults to ``SECRET_KEY``

    Returns:
        AuthResult: ``Authorized(email)`` or ``Unauthorized(reason)``
    """
    if not authorization or not authorization.strip():
        return Unauthorized("Missing credential")

    token = extract_bearer_token(authorization)
    if token is None:
        return Unauthorized("Malformed authorization header")

    try:
        payload = decode_token(token, secret_key)
    except ExpiredSignatureError:
        return Unauthorized("Credential expired")
    except JWTError:
        return Unauthorized("Invalid credential")

    email = payload.get("email")
    if not email or not isinstance(email, str):
        return Unauthorized("Missing identity claim")

    return Authorized(email=email)
