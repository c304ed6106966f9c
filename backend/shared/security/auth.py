"""
Bearer token verification.

Tokens are issued by the identity service. This backend only checks them
and hands the verified subject, the owner ID, to the routers. Services
receive the owner ID as a plain argument and never look at tokens.
"""

from __future__ import annotations

import time
import uuid
from typing import Any, NoReturn

import jwt
from fastapi import Header, HTTPException, status

from shared.config.settings import JWT_SECRET, JWT_ISSUER, JWT_AUDIENCE, settings
from shared.config.logging import get_logger

logger = get_logger(__name__)

ALGORITHM = "HS256"
TOKEN_TYPE = "access"
SCHEME = "bearer"


def _reject(detail: str) -> NoReturn:
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def sign_jwt(payload: dict[str, Any], ttl_seconds: int | None = None) -> str:
    """
    Mint an access token this API accepts. Used by tests and local tooling.

    A negative ttl_seconds produces an already expired token.
    """
    if ttl_seconds is None:
        ttl_seconds = settings.jwt_access_token_expire_minutes * 60

    issued_at = int(time.time())
    claims = {
        "iss": JWT_ISSUER,
        "aud": JWT_AUDIENCE,
        "type": TOKEN_TYPE,
        "jti": uuid.uuid4().hex,
        **payload,
        "iat": issued_at,
        "exp": issued_at + ttl_seconds,
    }
    return jwt.encode(claims, JWT_SECRET, algorithm=ALGORITHM)


def _check_claims(claims: dict[str, Any]) -> None:
    subject = claims.get("sub")
    if not isinstance(subject, str) or not subject.strip():
        _reject("Invalid token: missing subject claim")
    if claims.get("type", TOKEN_TYPE) != TOKEN_TYPE:
        _reject("Invalid token: invalid type claim")


def verify_jwt(token: str) -> dict[str, Any]:
    """
    Decode a token and return its claims.

    Signature, expiry, issuer and audience are checked by PyJWT; subject and
    token type here. Any failure is a 401.
    """
    try:
        claims = jwt.decode(
            token,
            JWT_SECRET,
            algorithms=[ALGORITHM],
            audience=JWT_AUDIENCE,
            issuer=JWT_ISSUER,
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        _reject("Token has expired")
    except jwt.MissingRequiredClaimError as e:
        _reject(f"Invalid token: missing {e.claim} claim")
    except jwt.InvalidTokenError as e:
        # Client only sees the generic message
        logger.warning("Rejected bearer token", reason=type(e).__name__, error=str(e))
        _reject("Invalid token")

    _check_claims(claims)
    return claims


def get_bearer_token(authorization: str | None) -> str:
    """Pull the token out of an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        _reject("Missing Authorization header")

    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != SCHEME or not token:
        _reject("Invalid Authorization header format. Expected: Bearer <token>")
    return token


def current_owner_id(
    authorization: str | None = Header(default=None, alias="Authorization"),
) -> str:
    """Dependency: the owner ID of the authenticated caller."""
    return verify_jwt(get_bearer_token(authorization))["sub"]
