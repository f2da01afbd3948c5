"""Sign-up, sign-in and token handling for the local identity store."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select

from app.auth.caller_context import CallerContext, from_claims
from app.auth.jwt import TokenPair, create_token_pair, decode_jwt
from app.core.config import Config, get_config
from app.core.exceptions import AuthenticationError, ConstraintViolationError
from app.core.security import hash_password, verify_password
from app.models.base import utcnow
from app.models.identity import Identity
from app.services.base_service import BaseService
from app.services.provisioning_service import ProvisioningService

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password."


class AuthService(BaseService):
    def __init__(self, db=None, settings: Config | None = None) -> None:
        super().__init__(db)
        self.settings = settings or get_config()

    def _issue_tokens(self, identity_id: str, email: str) -> TokenPair:
        return create_token_pair(
            identity_id=identity_id,
            email=email,
            secret=self.settings.JWT_SECRET,
            access_ttl_minutes=self.settings.JWT_ACCESS_TTL_MINUTES,
            refresh_ttl_days=self.settings.JWT_REFRESH_TTL_DAYS,
        )

    def _find_by_email(self, email: str) -> Identity | None:
        stmt = select(Identity).where(Identity.email == email.strip().lower())
        return self.db.execute(stmt).scalar_one_or_none()

    def sign_up(self, email: str, password: str, metadata: dict[str, Any] | None = None) -> tuple[Identity, TokenPair]:
        if self._find_by_email(email) is not None:
            raise ConstraintViolationError("An account with this email already exists.")
        identity = ProvisioningService(db=self.db).create_identity(
            email=email,
            hashed_password=hash_password(password, iterations=self.settings.PASSWORD_HASH_ITERATIONS),
            metadata=metadata,
        )
        return identity, self._issue_tokens(identity.id, identity.email)

    def sign_in(self, email: str, password: str) -> TokenPair:
        identity = self._find_by_email(email)
        if identity is None or not verify_password(password, identity.hashed_password):
            logger.info("auth.sign_in.failed", extra={"event": "auth.sign_in.failed"})
            raise AuthenticationError(INVALID_CREDENTIALS)
        identity.last_sign_in_at = utcnow()
        self.commit()
        logger.info("auth.sign_in.succeeded", extra={"event": "auth.sign_in.succeeded", "identity_id": identity.id})
        return self._issue_tokens(identity.id, identity.email)

    def refresh(self, refresh_token: str) -> TokenPair:
        claims = decode_jwt(refresh_token, secret=self.settings.JWT_SECRET)
        if claims.get("token_use") != "refresh":
            raise AuthenticationError("Token is not a refresh token.")
        identity = self.db.get(Identity, str(claims.get("sub")))
        if identity is None:
            raise AuthenticationError("Identity no longer exists.")
        return self._issue_tokens(identity.id, identity.email)

    def resolve_caller(self, access_token: str) -> CallerContext:
        """Caller for a valid access token whose identity still exists."""
        caller = from_claims(decode_jwt(access_token, secret=self.settings.JWT_SECRET))
        if self.db.get(Identity, caller.identity_id) is None:
            logger.info(
                "auth.caller.unknown_identity",
                extra={"event": "auth.caller.unknown_identity", "identity_id": caller.identity_id},
            )
            raise AuthenticationError("Identity no longer exists.")
        return caller

    def delete_account(self, caller: CallerContext) -> bool:
        return ProvisioningService(db=self.db).delete_identity(caller.identity_id)
