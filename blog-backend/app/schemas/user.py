# File: app/schemas/user.py

from pydantic import BaseModel, EmailStr, Field


class SigninInput(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class SignupInput(SigninInput):
    name: str = Field(min_length=1)


class TokenResponse(BaseModel):
    jwt: str
