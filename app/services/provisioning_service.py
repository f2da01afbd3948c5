"""Identity creation as one unit of work with its mirroring profile."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError

from app.core.exceptions import ConstraintViolationError
from app.models.identity import Identity
from app.services.base_service import BaseService

logger = logging.getLogger(__name__)


class ProvisioningService(BaseService):
    """Create identities; the profile row is written by the identity insert hook.

    Both rows are flushed and committed together. If either insert fails the
    whole unit is rolled back and nothing is left behind.
    """

    def create_identity(
        self,
        email: str,
        hashed_password: str,
        metadata: dict[str, Any] | None = None,
        identity_id: str | None = None,
    ) -> Identity:
        identity = Identity(
            email=email.strip().lower(),
            hashed_password=hashed_password,
            raw_user_meta_data=dict(metadata or {}),
        )
        if identity_id is not None:
            identity.id = identity_id
        self.db.add(identity)
        try:
            self.db.flush()
            self.commit()
        except IntegrityError as exc:
            self.rollback()
            logger.warning(
                "provisioning.identity.rejected",
                extra={"event": "provisioning.identity.rejected", "reason": str(exc.orig)},
            )
            raise ConstraintViolationError("Identity could not be created.") from exc
        self.db.refresh(identity)
        logger.info(
            "provisioning.identity.created",
            extra={"event": "provisioning.identity.created", "identity_id": identity.id},
        )
        return identity

    def delete_identity(self, identity_id: str) -> bool:
        """Remove an identity; the database cascades to the profile and owned rows."""
        identity = self.db.get(Identity, identity_id)
        if identity is None:
            return False
        self.db.delete(identity)
        self.commit()
        logger.info(
            "provisioning.identity.deleted",
            extra={"event": "provisioning.identity.deleted", "identity_id": identity_id},
        )
        return True
