"""Pydantic schema package for API contracts."""

from app.schemas.auth import (
    LoginRequest,
    RefreshRequest,
    SignUpRequest,
    SignUpResponse,
    TokenResponse,
)
from app.schemas.campaigns import CampaignCreateRequest, CampaignResponse, CampaignUpdateRequest
from app.schemas.common import ErrorEnvelope
from app.schemas.files import FileCreateRequest, FileResponse
from app.schemas.leads import LeadCreateRequest, LeadResponse, LeadUpdateRequest
from app.schemas.messages import MessageCreateRequest, MessageResponse, MessageUpdateRequest
from app.schemas.profiles import ProfileResponse, ProfileUpdateRequest

__all__ = [
    "CampaignCreateRequest",
    "CampaignResponse",
    "CampaignUpdateRequest",
    "ErrorEnvelope",
    "FileCreateRequest",
    "FileResponse",
    "LeadCreateRequest",
    "LeadResponse",
    "LeadUpdateRequest",
    "LoginRequest",
    "MessageCreateRequest",
    "MessageResponse",
    "MessageUpdateRequest",
    "ProfileResponse",
    "ProfileUpdateRequest",
    "RefreshRequest",
    "SignUpRequest",
    "SignUpResponse",
    "TokenResponse",
]
