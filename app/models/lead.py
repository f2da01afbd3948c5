"""Lead model module."""

from __future__ import annotations

from sqlalchemy import JSON, CheckConstraint, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, OwnedMixin, TimestampMixin, UUIDPrimaryKeyMixin
from app.models.enums import LeadStatus, check_in


class Lead(Base, UUIDPrimaryKeyMixin, TimestampMixin, OwnedMixin):
    __tablename__ = "leads"
    __table_args__ = (
        CheckConstraint(check_in("status", LeadStatus), name="ck_leads_status"),
        Index("idx_leads_owner_status", "owner_id", "status"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(320))
    phone: Mapped[str | None] = mapped_column(String(50))
    tags: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    source: Mapped[str | None] = mapped_column(String(120))
    status: Mapped[str] = mapped_column(
        String(20), default=LeadStatus.NEW.value, server_default=LeadStatus.NEW.value, nullable=False
    )
    notes: Mapped[str | None] = mapped_column(Text)
