"""Canonical enum values for the LeadPulse schema."""

from __future__ import annotations

import enum


class ProfileRole(str, enum.Enum):
    FREE = "free"
    PRO = "pro"
    ADMIN = "admin"


class LeadStatus(str, enum.Enum):
    NEW = "new"
    CONTACTED = "contacted"
    QUALIFIED = "qualified"
    CONVERTED = "converted"
    LOST = "lost"


class CampaignStatus(str, enum.Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"


class MessageType(str, enum.Enum):
    EMAIL = "email"
    SMS = "sms"
    CALL = "call"


class MessageStatus(str, enum.Enum):
    DRAFT = "draft"
    SENT = "sent"
    DELIVERED = "delivered"
    FAILED = "failed"


def check_in(column: str, values: type[enum.Enum]) -> str:
    """Render a CHECK expression restricting ``column`` to the enum's values."""
    allowed = ", ".join(f"'{member.value}'" for member in values)
    return f"{column} IN ({allowed})"
