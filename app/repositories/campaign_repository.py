"""Campaign repository."""

from __future__ import annotations

from app.models.campaign import Campaign
from app.repositories.base_repository import AuthorizedRepository


class CampaignRepository(AuthorizedRepository[Campaign]):
    model = Campaign
