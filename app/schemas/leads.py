"""Lead request/response schemas for API contracts."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import LeadStatus


class LeadCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: str | None = Field(default=None, max_length=320)
    phone: str | None = Field(default=None, max_length=50)
    tags: list[str] = Field(default_factory=list)
    source: str | None = Field(default=None, max_length=120)
    status: LeadStatus = LeadStatus.NEW
    notes: str | None = Field(default=None, max_length=20000)


class LeadUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: str | None = Field(default=None, max_length=320)
    phone: str | None = Field(default=None, max_length=50)
    tags: list[str] | None = None
    source: str | None = Field(default=None, max_length=120)
    status: LeadStatus | None = None
    notes: str | None = Field(default=None, max_length=20000)


class LeadResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str | None = None
    phone: str | None = None
    tags: list[str] = Field(default_factory=list)
    source: str | None = None
    status: LeadStatus
    notes: str | None = None
    owner_id: str
    created_at: datetime
    updated_at: datetime
