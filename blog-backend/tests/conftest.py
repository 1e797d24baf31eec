# File: tests/conftest.py

"""
Shared fixtures.

The app reads DATABASE_URL and JWT_SECRET at import time, so they are set
here before anything from `app` is imported. Tests run against an in-memory
SQLite database that is recreated for every test.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ.pop("JWT_EXPIRE_MINUTES", None)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.db.init_db import drop_db, init_db  # noqa: E402
from app.db.session import SessionLocal  # noqa: E402
from app.main import app  # noqa: E402

SIGNUP_URL = "/api/v1/user/signup"
SIGNIN_URL = "/api/v1/user/signin"
BLOG_URL = "/api/v1/blog"


@pytest.fixture(autouse=True)
def database():
    init_db()
    yield
    drop_db()


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def signup(client):
    """Sign up a user and return their token."""

    def _signup(email="a@x.com", password="pw1234", name="A"):
        resp = client.post(SIGNUP_URL, json={"email": email, "password": password, "name": name})
        assert resp.status_code == 200, resp.text
        return resp.json()["jwt"]

    return _signup


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
