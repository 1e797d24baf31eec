# File: tests/test_auth_gate.py

import pytest

from conftest import BLOG_URL, bearer
from app.api.deps import AuthContext, extract_bearer_token, get_auth_context
from app.core.exceptions import AuthError
from app.core.security import create_access_token

POST = {"title": "T", "content": "C"}


def test_missing_header_is_no_token(client):
    resp = client.post(BLOG_URL, json=POST)
    assert resp.status_code == 401
    assert resp.json() == {"error": "Unauthorized: No token provided"}
    assert resp.headers["www-authenticate"] == "Bearer"


def test_header_without_token_is_invalid_format(client):
    resp = client.post(BLOG_URL, json=POST, headers={"Authorization": "Bearer"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Unauthorized: Invalid token format"}


def test_bad_token_is_verification_failed(client):
    resp = client.post(BLOG_URL, json=POST, headers=bearer("not.a.token"))
    assert resp.status_code == 401
    assert resp.json() == {"error": "Unauthorized: Token verification failed"}


def test_token_from_other_secret_is_verification_failed(client):
    token = create_access_token("user-1", secret="another-secret")
    resp = client.put(BLOG_URL, json={"id": "x", "title": "T"}, headers=bearer(token))
    assert resp.status_code == 401
    assert resp.json() == {"error": "Unauthorized: Token verification failed"}


@pytest.mark.parametrize("header", ["", "Bearer", "Bearer   ", "Token abc", "abc", "Bearer a b"])
def test_extract_rejects_malformed_headers(header):
    with pytest.raises(AuthError) as exc_info:
        extract_bearer_token(header)
    assert exc_info.value.reason in ("missing_token", "malformed_header")


def test_extract_accepts_bearer_case_insensitively():
    assert extract_bearer_token("bearer abc") == "abc"


def test_gate_returns_context_for_valid_token():
    token = create_access_token("user-1")
    assert get_auth_context(f"Bearer {token}") == AuthContext(user_id="user-1")


def test_gate_rejects_expired_token():
    from datetime import datetime, timedelta, timezone

    issued = datetime.now(timezone.utc) - timedelta(days=1)
    token = create_access_token("user-1", expires_minutes=1, now_utc=issued)
    with pytest.raises(AuthError) as exc_info:
        get_auth_context(f"Bearer {token}")
    assert exc_info.value.message == "Unauthorized: Invalid or expired token"


def test_unauthorized_request_does_not_persist(client, db):
    from app.services.post_store import PostStore

    client.post(BLOG_URL, json=POST, headers=bearer("garbage"))
    assert PostStore(db).find_all() == []
