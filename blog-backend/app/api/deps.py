# File: app/api/deps.py

"""
Shared route dependencies: database session and the auth gate.

The auth gate reads `Authorization: Bearer <token>`, verifies the token and
hands the route an AuthContext with the caller's user id. Routes receive it
as a parameter; nothing is stored on the request or in globals.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Header

from app.core.exceptions import AuthError, InvalidTokenError
from app.core.security import decode_access_token, subject_from_claims
from app.db.session import get_db  # noqa: F401  (re-exported for routes)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthContext:
    """Identity of the caller for the current request."""

    user_id: str


def extract_bearer_token(authorization: Optional[str]) -> str:
    if not authorization:
        raise AuthError("No token provided", reason="missing_token")

    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token or " " in token:
        raise AuthError("Invalid token format", reason="malformed_header")
    return token


def get_auth_context(authorization: Optional[str] = Header(default=None)) -> AuthContext:
    """
    Dependency that requires a valid bearer token.

    Usage:
        @router.post("/")
        def create(ctx: AuthContext = Depends(get_auth_context)):
            ...
    """
    try:
        token = extract_bearer_token(authorization)

        try:
            claims = decode_access_token(token)
        except InvalidTokenError as exc:
            if exc.code == "TOKEN_EXPIRED":
                raise AuthError("Invalid or expired token", reason="invalid_token") from exc
            raise AuthError("Token verification failed", reason="verification_failed") from exc

        user_id = subject_from_claims(claims)
        if user_id is None:
            raise AuthError("Invalid or expired token", reason="invalid_token")
    except AuthError as exc:
        logger.info("Request rejected by auth gate: %s", exc.reason)
        raise

    return AuthContext(user_id=user_id)
