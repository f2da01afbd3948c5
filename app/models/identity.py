"""Identity model module."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, CreatedAtMixin, UUIDPrimaryKeyMixin


class Identity(Base, UUIDPrimaryKeyMixin, CreatedAtMixin):
    """Authentication principal; its id is the stable identity token subject."""

    __tablename__ = "identities"

    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    raw_user_meta_data: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict, nullable=False)
    last_sign_in_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
