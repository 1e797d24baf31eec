# File: app/api/v1/routes_user.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.api.validation import validate_signin, validate_signup
from app.schemas.user import SigninInput, SignupInput, TokenResponse
from app.services import auth_service

router = APIRouter()


@router.post("/signup", response_model=TokenResponse, summary="Create an account")
def signup(
    payload: SignupInput = Depends(validate_signup),
    db: Session = Depends(get_db),
):
    """
    Register a new user and return a session token.

    A duplicate email or any store failure returns 403.
    """
    return TokenResponse(jwt=auth_service.signup(db, payload))


@router.post("/signin", response_model=TokenResponse, summary="Sign in")
def signin(
    payload: SigninInput = Depends(validate_signin),
    db: Session = Depends(get_db),
):
    """
    Exchange email and password for a session token.

    Unknown email, wrong password and store failures all return 403.
    """
    return TokenResponse(jwt=auth_service.signin(db, payload))
