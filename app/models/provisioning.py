"""Profile provisioning hook fired for every new identity row."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import event, insert

from app.models.enums import ProfileRole
from app.models.identity import Identity
from app.models.profile import Profile

logger = logging.getLogger(__name__)


def _metadata_text(metadata: dict[str, Any] | None, key: str) -> str | None:
    if not metadata:
        return None
    value = metadata.get(key)
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


def profile_values_for(identity: Identity) -> dict[str, Any]:
    """Map an identity and its signup metadata onto a new profile row."""
    metadata = identity.raw_user_meta_data or {}
    return {
        "id": identity.id,
        "email": identity.email,
        "full_name": _metadata_text(metadata, "full_name"),
        "avatar_url": _metadata_text(metadata, "avatar_url"),
        "role": ProfileRole.FREE.value,
    }


@event.listens_for(Identity, "after_insert")
def provision_profile(mapper, connection, target: Identity) -> None:
    """Insert the mirroring profile on the identity's own connection.

    Runs inside the flush that writes the identity, so a failing profile insert
    aborts the flush and the surrounding transaction takes both rows with it.
    """
    connection.execute(insert(Profile.__table__).values(**profile_values_for(target)))
    logger.info(
        "provisioning.profile.created",
        extra={"event": "provisioning.profile.created", "identity_id": target.id},
    )
