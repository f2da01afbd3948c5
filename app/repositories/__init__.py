"""Ownership-scoped repositories, one per table."""

from app.repositories.base_repository import AuthorizedRepository
from app.repositories.campaign_repository import CampaignRepository
from app.repositories.file_repository import FileRepository
from app.repositories.lead_repository import LeadRepository
from app.repositories.message_repository import MessageRepository
from app.repositories.profile_repository import ProfileRepository

__all__ = [
    "AuthorizedRepository",
    "CampaignRepository",
    "FileRepository",
    "LeadRepository",
    "MessageRepository",
    "ProfileRepository",
]
