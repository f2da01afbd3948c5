"""Dependency providers for API handlers."""

from __future__ import annotations

from collections.abc import Generator

from sqlalchemy.orm import Session

from app.core.config import Config, get_config
from app.database.db import get_db


def get_settings() -> Config:
    """Return validated application configuration."""
    return get_config()


def get_db_session() -> Generator[Session, None, None]:
    """Yield SQLAlchemy session for dependency injection."""
    yield from get_db()
