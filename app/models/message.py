"""Message model module."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, OwnedMixin, TimestampMixin, UUIDPrimaryKeyMixin
from app.models.enums import MessageStatus, MessageType, check_in


class Message(Base, UUIDPrimaryKeyMixin, TimestampMixin, OwnedMixin):
    __tablename__ = "messages"
    __table_args__ = (
        CheckConstraint(check_in("type", MessageType), name="ck_messages_type"),
        CheckConstraint(check_in("status", MessageStatus), name="ck_messages_status"),
        Index("idx_messages_owner_lead", "owner_id", "lead_id"),
    )

    lead_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("leads.id", ondelete="CASCADE"), nullable=False, index=True
    )
    campaign_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("campaigns.id", ondelete="SET NULL"), index=True
    )
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), default=MessageStatus.DRAFT.value, server_default=MessageStatus.DRAFT.value, nullable=False
    )
    sent_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
