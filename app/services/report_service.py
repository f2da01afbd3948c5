"""Dashboard aggregates computed over the caller's own rows."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from app.auth.caller_context import CallerContext
from app.models.campaign import Campaign
from app.models.enums import CampaignStatus, LeadStatus, MessageStatus, MessageType
from app.models.file import File
from app.models.lead import Lead
from app.models.message import Message
from app.repositories.campaign_repository import CampaignRepository
from app.repositories.file_repository import FileRepository
from app.repositories.lead_repository import LeadRepository
from app.repositories.message_repository import MessageRepository
from app.services.base_service import BaseService
from app.utils.validators import normalize_budget


def _with_all_keys(counts: dict[Any, int], members) -> dict[str, int]:
    # Every enum value is reported, zero included, so charts keep a stable axis.
    return {member.value: int(counts.get(member.value, 0)) for member in members}


def _by_source(counts: dict[str | None, int]) -> dict[str, int]:
    merged: dict[str, int] = {}
    for source, total in counts.items():
        key = source or "unknown"
        merged[key] = merged.get(key, 0) + int(total)
    return dict(sorted(merged.items()))


class ReportService(BaseService):
    def __init__(self, caller: CallerContext | None, db=None) -> None:
        super().__init__(db)
        self.leads = LeadRepository(self.db, caller)
        self.campaigns = CampaignRepository(self.db, caller)
        self.messages = MessageRepository(self.db, caller)
        self.files = FileRepository(self.db, caller)

    def summary(self) -> dict[str, Any]:
        total_budget = self.campaigns.total(Campaign.budget)
        active_budget = self.campaigns.total(Campaign.budget, Campaign.status == CampaignStatus.ACTIVE.value)
        return {
            "leads": {
                "total": self.leads.count(),
                "by_status": _with_all_keys(self.leads.count_by(Lead.status), LeadStatus),
                "by_source": _by_source(self.leads.count_by(Lead.source)),
            },
            "campaigns": {
                "total": self.campaigns.count(),
                "by_status": _with_all_keys(self.campaigns.count_by(Campaign.status), CampaignStatus),
                "total_budget": normalize_budget(total_budget or Decimal("0")),
                "active_budget": normalize_budget(active_budget or Decimal("0")),
            },
            "messages": {
                "total": self.messages.count(),
                "by_type": _with_all_keys(self.messages.count_by(Message.type), MessageType),
                "by_status": _with_all_keys(self.messages.count_by(Message.status), MessageStatus),
            },
            "files": {
                "total": self.files.count(),
                "total_bytes": int(self.files.total(File.size) or 0),
            },
        }
