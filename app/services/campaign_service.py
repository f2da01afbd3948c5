"""Campaign service: owner-scoped CRUD with budget normalization."""

from __future__ import annotations

from datetime import date
from typing import Any

from app.auth.caller_context import CallerContext
from app.core.exceptions import ValidationError
from app.models.campaign import Campaign
from app.repositories.campaign_repository import CampaignRepository
from app.services.base_service import BaseService, Page
from app.utils.validators import normalize_budget, sanitize_text


def _prepare(data: dict[str, Any]) -> dict[str, Any]:
    payload = dict(data)
    if "budget" in payload:
        payload["budget"] = normalize_budget(payload["budget"])
    if "description" in payload:
        payload["description"] = sanitize_text(payload["description"])
    return payload


def _check_date_order(start_date: date | None, end_date: date | None) -> None:
    if start_date and end_date and end_date < start_date:
        raise ValidationError("end_date must not precede start_date.")


class CampaignService(BaseService):
    def __init__(self, caller: CallerContext | None, db=None) -> None:
        super().__init__(db)
        self.repo = CampaignRepository(self.db, caller)

    def create_campaign(self, data: dict[str, Any]) -> Campaign:
        payload = _prepare(data)
        _check_date_order(payload.get("start_date"), payload.get("end_date"))
        campaign = self.repo.create(**payload)
        self.commit()
        self.db.refresh(campaign)
        return campaign

    def get_campaign(self, campaign_id: str) -> Campaign | None:
        return self.repo.get(campaign_id)

    def list_campaigns(self, status: str | None = None, limit: int = 50, offset: int = 0) -> Page[Campaign]:
        criteria = [Campaign.status == status] if status else []
        items = self.repo.list(*criteria, order_by=(Campaign.created_at.desc(), Campaign.id), limit=limit, offset=offset)
        return Page(items=items, total=self.repo.count(*criteria), limit=limit, offset=offset)

    def update_campaign(self, campaign_id: str, changes: dict[str, Any]) -> Campaign | None:
        payload = _prepare(changes)
        if "start_date" in payload or "end_date" in payload:
            # A one-sided change is checked against the stored counterpart.
            current = self.repo.get(campaign_id)
            if current is None:
                return None
            _check_date_order(
                payload.get("start_date", current.start_date),
                payload.get("end_date", current.end_date),
            )
        campaign = self.repo.update(campaign_id, **payload)
        if campaign is None:
            return None
        self.commit()
        self.db.refresh(campaign)
        return campaign

    def delete_campaign(self, campaign_id: str) -> bool:
        """Delete a campaign; messages that referenced it keep existing with no campaign."""
        deleted = self.repo.delete(campaign_id)
        self.commit()
        return deleted
