"""SQLAlchemy model package for the LeadPulse schema."""

from app.models.base import Base
from app.models.campaign import Campaign
from app.models.enums import (
    CampaignStatus,
    LeadStatus,
    MessageStatus,
    MessageType,
    ProfileRole,
)
from app.models.file import File
from app.models.identity import Identity
from app.models.lead import Lead
from app.models.message import Message
from app.models.profile import Profile
from app.models import provisioning  # noqa: F401  registers the identity insert hook

__all__ = [
    "Base",
    "Campaign",
    "CampaignStatus",
    "File",
    "Identity",
    "Lead",
    "LeadStatus",
    "Message",
    "MessageStatus",
    "MessageType",
    "Profile",
    "ProfileRole",
]
