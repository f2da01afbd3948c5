from __future__ import annotations

import pytest

from app.core.config import _build_config
from app.core.exceptions import ConfigurationError


def test_development_defaults_are_valid(monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("JWT_SECRET", raising=False)
    config = _build_config("development")
    assert config.DATABASE_URL.startswith("sqlite")
    assert config.DEBUG is True
    assert config.is_production is False


def test_rejects_unsupported_database_scheme(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "mysql://user:pw@localhost/db")
    with pytest.raises(ConfigurationError, match="DATABASE_URL"):
        _build_config("development")


def test_production_rejects_placeholder_jwt_secret(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://app:pw@db.internal:5432/leadpulse")
    monkeypatch.delenv("JWT_SECRET", raising=False)
    with pytest.raises(ConfigurationError, match="JWT_SECRET"):
        _build_config("production")


def test_production_with_real_secret(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://app:pw@db.internal:5432/leadpulse")
    monkeypatch.setenv("JWT_SECRET", "a-real-secret")
    monkeypatch.delenv("DEBUG", raising=False)
    config = _build_config("production")
    assert config.is_production
    assert config.DEBUG is False
    assert config.DB_CONNECTIVITY_REQUIRED is True
