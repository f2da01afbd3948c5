"""Message request/response schemas for API contracts."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import MessageStatus, MessageType


class MessageCreateRequest(BaseModel):
    lead_id: str = Field(min_length=1, max_length=36)
    campaign_id: str | None = Field(default=None, max_length=36)
    type: MessageType
    content: str = Field(min_length=1, max_length=20000)
    status: MessageStatus = MessageStatus.DRAFT
    sent_at: datetime | None = None


class MessageUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    campaign_id: str | None = Field(default=None, max_length=36)
    type: MessageType | None = None
    content: str | None = Field(default=None, min_length=1, max_length=20000)
    status: MessageStatus | None = None
    sent_at: datetime | None = None


class MessageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    lead_id: str
    campaign_id: str | None = None
    type: MessageType
    content: str
    status: MessageStatus
    sent_at: datetime | None = None
    owner_id: str
    created_at: datetime
    updated_at: datetime
