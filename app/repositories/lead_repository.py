"""Lead repository."""

from __future__ import annotations

from app.models.lead import Lead
from app.repositories.base_repository import AuthorizedRepository


class LeadRepository(AuthorizedRepository[Lead]):
    model = Lead
