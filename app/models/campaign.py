"""Campaign model module."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import CheckConstraint, Date, Index, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, OwnedMixin, TimestampMixin, UUIDPrimaryKeyMixin
from app.models.enums import CampaignStatus, check_in


class Campaign(Base, UUIDPrimaryKeyMixin, TimestampMixin, OwnedMixin):
    __tablename__ = "campaigns"
    __table_args__ = (
        CheckConstraint(check_in("status", CampaignStatus), name="ck_campaigns_status"),
        CheckConstraint("budget IS NULL OR budget >= 0", name="ck_campaigns_budget_non_negative"),
        CheckConstraint(
            "start_date IS NULL OR end_date IS NULL OR end_date >= start_date",
            name="ck_campaigns_date_order",
        ),
        Index("idx_campaigns_owner_status", "owner_id", "status"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    status: Mapped[str] = mapped_column(
        String(20), default=CampaignStatus.DRAFT.value, server_default=CampaignStatus.DRAFT.value, nullable=False
    )
    start_date: Mapped[date | None] = mapped_column(Date)
    end_date: Mapped[date | None] = mapped_column(Date)
    budget: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
