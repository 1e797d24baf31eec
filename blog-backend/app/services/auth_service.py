# File: app/services/auth_service.py

"""
Authentication service.

Signup hashes the password, stores the user and issues a token for the new
id. Signin looks the user up by email, checks the password and issues a
fresh token. Store failures are translated here into the generic 403
responses clients see; the internal detail is logged by the stores.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.core.exceptions import PersistenceError, RequestFailedError
from app.core.security import create_access_token, hash_password, verify_password
from app.models.user import User
from app.schemas.user import SigninInput, SignupInput
from app.services.user_store import UserStore

logger = logging.getLogger(__name__)

SIGNUP_FAILED = "error while signing up"
SIGNIN_FAILED = "error while signing in"
USER_NOT_FOUND = "User not found"
INCORRECT_PASSWORD = "Incorrect password"


def authenticate_user(
    db: Session,
    *,
    email: str,
    password: str,
) -> Optional[User]:
    """
    Return the user if `password` matches, None if it does not.

    Raises RequestFailedError (403) when no user has this email or the
    store fails.
    """
    try:
        user = UserStore(db).find_by_email(email)
    except PersistenceError as exc:
        raise RequestFailedError(SIGNIN_FAILED, status_code=403) from exc

    if user is None:
        raise RequestFailedError(USER_NOT_FOUND, status_code=403)

    if not verify_password(password, user.password_hash):
        return None
    return user


def signup(db: Session, payload: SignupInput) -> str:
    """Create a user and return a token for it."""
    password_hash = hash_password(payload.password)
    try:
        user_id = UserStore(db).create(
            email=payload.email,
            password_hash=password_hash,
            name=payload.name,
        )
    except PersistenceError as exc:
        raise RequestFailedError(SIGNUP_FAILED, status_code=403) from exc

    logger.info("User %s signed up", user_id)
    return create_access_token(user_id)


def signin(db: Session, payload: SigninInput) -> str:
    """Check credentials and return a token."""
    user = authenticate_user(db, email=payload.email, password=payload.password)
    if user is None:
        logger.info("Signin rejected: incorrect password")
        raise RequestFailedError(INCORRECT_PASSWORD, status_code=403)

    return create_access_token(user.id)
