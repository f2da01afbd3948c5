"""Profile repository; a profile is owned by the identity whose id it shares."""

from __future__ import annotations

from app.models.profile import Profile
from app.repositories.base_repository import AuthorizedRepository


class ProfileRepository(AuthorizedRepository[Profile]):
    model = Profile
    owner_column = "id"
    # Role changes are not self-service.
    readonly_fields = frozenset({"created_at", "updated_at", "role"})

    def get_own(self) -> Profile | None:
        return self.get(self.caller.identity_id)
