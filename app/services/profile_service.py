"""Profile service for the caller's own profile row."""

from __future__ import annotations

from typing import Any

from app.auth.caller_context import CallerContext
from app.models.profile import Profile
from app.repositories.profile_repository import ProfileRepository
from app.services.base_service import BaseService
from app.services.provisioning_service import ProvisioningService
from app.utils.validators import sanitize_text


class ProfileService(BaseService):
    def __init__(self, caller: CallerContext | None, db=None) -> None:
        super().__init__(db)
        self.repo = ProfileRepository(self.db, caller)

    def get_profile(self) -> Profile | None:
        return self.repo.get_own()

    def update_profile(self, changes: dict[str, Any]) -> Profile | None:
        payload = {key: sanitize_text(value) for key, value in changes.items()}
        profile = self.repo.update(self.repo.caller.identity_id, **payload)
        if profile is None:
            return None
        self.commit()
        self.db.refresh(profile)
        return profile

    def delete_profile(self) -> bool:
        """Delete the profile together with its identity so no identity is left without one."""
        if self.repo.get_own() is None:
            return False
        return ProvisioningService(db=self.db).delete_identity(self.repo.caller.identity_id)
