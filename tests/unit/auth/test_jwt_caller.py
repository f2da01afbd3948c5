from __future__ import annotations

from datetime import timedelta

import pytest

from app.auth.caller_context import CallerContext, enforce_owner_match, from_claims, require_caller
from app.auth.jwt import create_token_pair, decode_jwt, encode_jwt
from app.core.exceptions import AuthenticationError, AuthorizationError


def test_jwt_roundtrip_contains_required_claims():
    tokens = create_token_pair(identity_id="u1", email="u1@example.com", secret="test-secret")
    claims = decode_jwt(tokens.access_token, secret="test-secret")
    assert claims["sub"] == "u1"
    assert claims["email"] == "u1@example.com"
    assert claims["token_use"] == "access"
    assert "exp" in claims
    assert "iat" in claims
    assert "jti" in claims


def test_jwt_rejects_wrong_secret():
    tokens = create_token_pair(identity_id="u1", email="u1@example.com", secret="test-secret")
    with pytest.raises(AuthenticationError, match="signature"):
        decode_jwt(tokens.access_token, secret="other-secret")


def test_jwt_rejects_expired_token():
    token = encode_jwt({"sub": "u1", "token_use": "access"}, secret="test-secret", ttl=timedelta(seconds=-10))
    with pytest.raises(AuthenticationError, match="expired"):
        decode_jwt(token, secret="test-secret")


def test_jwt_rejects_malformed_token():
    with pytest.raises(AuthenticationError):
        decode_jwt("not-a-token", secret="test-secret")


def test_caller_from_access_claims():
    tokens = create_token_pair(identity_id="u1", email="u1@example.com", secret="test-secret")
    caller = from_claims(decode_jwt(tokens.access_token, secret="test-secret"))
    assert caller == CallerContext(identity_id="u1", email="u1@example.com")


def test_refresh_token_is_not_a_caller():
    tokens = create_token_pair(identity_id="u1", email="u1@example.com", secret="test-secret")
    with pytest.raises(AuthenticationError):
        from_claims(decode_jwt(tokens.refresh_token, secret="test-secret"))


def test_anonymous_caller_is_rejected():
    with pytest.raises(AuthenticationError):
        require_caller(None)
    with pytest.raises(AuthenticationError):
        require_caller(CallerContext(identity_id=""))


def test_owner_match():
    caller = CallerContext(identity_id="u1")
    enforce_owner_match("u1", caller)
    with pytest.raises(AuthorizationError):
        enforce_owner_match("u2", caller)
