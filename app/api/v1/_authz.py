"""Shared authentication helpers for API v1 route modules."""

from __future__ import annotations

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from app.auth.caller_context import CallerContext
from app.core.config import Config
from app.core.dependencies import get_db_session, get_settings
from app.core.exceptions import AuthenticationError
from app.services.auth_service import AuthService


def _extract_bearer_token(authorization: str | None) -> str:
    if authorization is None or not authorization.strip():
        raise AuthenticationError("Authorization header is required.")
    parts = authorization.strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1].strip():
        raise AuthenticationError("Authorization header must use Bearer token.")
    return parts[1].strip()


def get_current_caller(
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
    settings: Config = Depends(get_settings),
) -> CallerContext:
    """Resolve the calling identity from the bearer access token."""
    token = _extract_bearer_token(authorization)
    return AuthService(db=db, settings=settings).resolve_caller(token)
