from __future__ import annotations

from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

from app.auth.caller_context import CallerContext
from app.core.config import get_config
from app.core.dependencies import get_db_session, get_settings
from app.core.security import hash_password
from app.database.db import build_engine, build_session_factory
from app.models import Base
from app.services.provisioning_service import ProvisioningService

FAST_HASH_ITERATIONS = 1000


@pytest.fixture
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'leadpulse_test.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_caller(db):
    """Create an identity (and, through provisioning, its profile); return its caller context."""

    def _make_caller(email: str, metadata: dict | None = None) -> CallerContext:
        identity = ProvisioningService(db=db).create_identity(
            email=email,
            hashed_password=hash_password("password123", iterations=FAST_HASH_ITERATIONS),
            metadata=metadata,
        )
        return CallerContext(identity_id=identity.id, email=identity.email)

    return _make_caller


@pytest.fixture
def test_settings():
    return replace(get_config(), PASSWORD_HASH_ITERATIONS=FAST_HASH_ITERATIONS)


@pytest.fixture
def client(session_factory, test_settings):
    from app.main import create_app

    app = create_app()

    def _session():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db_session] = _session
    app.dependency_overrides[get_settings] = lambda: test_settings
    with TestClient(app) as test_client:
        yield test_client
