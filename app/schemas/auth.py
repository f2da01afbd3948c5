"""Auth schema module."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SignUpRequest(BaseModel):
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=8, max_length=256)
    full_name: str | None = Field(default=None, max_length=255)
    avatar_url: str | None = Field(default=None, max_length=2000)

    def user_metadata(self) -> dict[str, str]:
        return {
            key: value
            for key, value in (("full_name", self.full_name), ("avatar_url", self.avatar_url))
            if value
        }


class LoginRequest(BaseModel):
    email: str
    password: str = Field(min_length=8, max_length=256)


class TokenResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class SignUpResponse(TokenResponse):
    identity_id: str


class RefreshRequest(BaseModel):
    refresh_token: str
