"""Caller context extraction and ownership enforcement utilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.core.exceptions import AuthenticationError, AuthorizationError


@dataclass(frozen=True)
class CallerContext:
    """Authenticated principal on whose behalf a persistence call runs."""

    identity_id: str
    email: str | None = None


def from_claims(claims: dict[str, Any]) -> CallerContext:
    """Build caller context from verified access-token claims."""
    if claims.get("token_use") != "access":
        raise AuthenticationError("Token is not an access token.")
    identity_id = claims.get("sub")
    if not isinstance(identity_id, str) or not identity_id.strip():
        raise AuthenticationError("Token claims are missing the identity.")
    email = claims.get("email")
    return CallerContext(identity_id=identity_id, email=email if isinstance(email, str) else None)


def require_caller(caller: CallerContext | None) -> CallerContext:
    """Reject anonymous access before any persistence call."""
    if caller is None or not caller.identity_id:
        raise AuthenticationError("Authentication is required.")
    return caller


def enforce_owner_match(owner_id: str | None, caller: CallerContext) -> None:
    """Ensure a row being written is owned by the caller."""
    if owner_id != caller.identity_id:
        raise AuthorizationError("Rows may only be written for the calling identity.")
