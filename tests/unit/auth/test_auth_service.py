from __future__ import annotations

import pytest

from app.auth.jwt import create_access_token
from app.core.exceptions import AuthenticationError
from app.services.auth_service import AuthService


def test_resolve_caller_returns_existing_identity(db, test_settings):
    service = AuthService(db=db, settings=test_settings)
    identity, tokens = service.sign_up(email="u1@example.com", password="password123")

    caller = service.resolve_caller(tokens.access_token)

    assert caller.identity_id == identity.id
    assert caller.email == "u1@example.com"


def test_resolve_caller_rejects_token_of_deleted_account(db, test_settings):
    service = AuthService(db=db, settings=test_settings)
    identity, tokens = service.sign_up(email="u1@example.com", password="password123")
    identity_id = identity.id

    assert service.delete_account(service.resolve_caller(tokens.access_token)) is True

    with pytest.raises(AuthenticationError):
        service.resolve_caller(tokens.access_token)
    with pytest.raises(AuthenticationError):
        service.refresh(tokens.refresh_token)
    with pytest.raises(AuthenticationError):
        service.resolve_caller(
            create_access_token(identity_id, "u1@example.com", secret=test_settings.JWT_SECRET)
        )


def test_resolve_caller_rejects_refresh_token(db, test_settings):
    service = AuthService(db=db, settings=test_settings)
    _, tokens = service.sign_up(email="u1@example.com", password="password123")

    with pytest.raises(AuthenticationError):
        service.resolve_caller(tokens.refresh_token)
