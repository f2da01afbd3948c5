"""File metadata schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class FileCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    type: str = Field(min_length=1, max_length=120)
    size: int = Field(ge=0)
    url: str = Field(min_length=1, max_length=2000)


class FileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    type: str
    size: int
    url: str
    owner_id: str
    created_at: datetime
