# File: app/core/security.py

"""
Security helpers for the blog API.

Password hashing uses argon2id through argon2-cffi. The salt is generated
per call and embedded in the encoded hash, so nothing else has to be stored.

Session tokens are HS256 JWTs (python-jose) carrying a single `id` claim
with the user's id. No `exp` claim is set unless JWT_EXPIRE_MINUTES is
configured, so by default a token stays valid for as long as the signing
secret does.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError
from jose import ExpiredSignatureError, JWTError, jwt

from app.core.config import get_settings
from app.core.exceptions import InvalidTokenError

logger = logging.getLogger(__name__)

SUBJECT_CLAIM = "id"

_password_hasher = PasswordHasher()


# ---------- Passwords ----------


def hash_password(password: str) -> str:
    """Return an argon2id hash of `password` with a fresh random salt."""
    return _password_hasher.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check `plain_password` against a stored hash.

    Returns False on mismatch and also when the stored hash is malformed.
    """
    if not isinstance(hashed_password, str) or not hashed_password:
        return False
    try:
        return _password_hasher.verify(hashed_password, plain_password)
    except (VerificationError, InvalidHashError, UnicodeEncodeError):
        return False


# ---------- Tokens ----------


def create_access_token(
    subject_id: Any,
    *,
    secret: Optional[str] = None,
    expires_minutes: Optional[int] = None,
    now_utc: Optional[datetime] = None,
) -> str:
    """
    Issue a signed token for `subject_id`.

    `secret` and `expires_minutes` fall back to the configured values.
    """
    settings = get_settings()
    to_encode: dict[str, Any] = {SUBJECT_CLAIM: str(subject_id)}

    if expires_minutes is None:
        expires_minutes = settings.access_token_expire_minutes
    if expires_minutes:
        current_time = now_utc or datetime.now(timezone.utc)
        to_encode["exp"] = current_time + timedelta(minutes=expires_minutes)

    return jwt.encode(
        to_encode,
        secret or settings.jwt_secret,
        algorithm=settings.algorithm,
    )


def decode_access_token(token: str, *, secret: Optional[str] = None) -> dict[str, Any]:
    """
    Verify the token signature and return its claims.

    Raises InvalidTokenError for a malformed token, a bad signature or an
    expired token.
    """
    settings = get_settings()
    try:
        return jwt.decode(
            token,
            secret or settings.jwt_secret,
            algorithms=[settings.algorithm],
        )
    except ExpiredSignatureError as exc:
        raise InvalidTokenError("Token has expired", code="TOKEN_EXPIRED") from exc
    except JWTError as exc:
        raise InvalidTokenError(str(exc), code="INVALID_TOKEN") from exc


def subject_from_claims(claims: dict[str, Any]) -> Optional[str]:
    subject = claims.get(SUBJECT_CLAIM)
    if not subject or isinstance(subject, (dict, list, bool)):
        return None
    subject = str(subject)
    return subject or None


def verify_token(token: str, *, secret: Optional[str] = None) -> Optional[str]:
    """
    Return the subject id carried by `token`, or None if it does not verify.

    Never raises for bad input.
    """
    if not isinstance(token, str) or not token:
        return None
    try:
        claims = decode_access_token(token, secret=secret)
    except InvalidTokenError as exc:
        logger.debug("Token rejected: %s", exc.message)
        return None
    return subject_from_claims(claims)
