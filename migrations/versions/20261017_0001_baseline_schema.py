"""baseline schema: identities, profiles and owned marketing records

Revision ID: 20261017_0001
Revises:
Create Date: 2026-10-17 00:00:01
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20261017_0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps(updated: bool = True) -> list[sa.Column]:
    columns = [sa.Column("created_at", sa.DateTime(timezone=True), nullable=False)]
    if updated:
        columns.append(sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False))
    return columns


def _owner() -> sa.Column:
    return sa.Column(
        "owner_id",
        sa.String(36),
        sa.ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "identities",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("hashed_password", sa.String(255), nullable=False),
        sa.Column("raw_user_meta_data", sa.JSON(), nullable=False),
        sa.Column("last_sign_in_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(updated=False),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "profiles",
        sa.Column("id", sa.String(36), sa.ForeignKey("identities.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("full_name", sa.String(255), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="free"),
        *_timestamps(),
        sa.CheckConstraint("role IN ('free', 'pro', 'admin')", name="ck_profiles_role"),
    )

    op.create_table(
        "leads",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("source", sa.String(120), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="new"),
        sa.Column("notes", sa.Text(), nullable=True),
        _owner(),
        *_timestamps(),
        sa.CheckConstraint(
            "status IN ('new', 'contacted', 'qualified', 'converted', 'lost')",
            name="ck_leads_status",
        ),
    )
    op.create_index("ix_leads_owner_id", "leads", ["owner_id"])
    op.create_index("idx_leads_owner_status", "leads", ["owner_id", "status"])

    op.create_table(
        "campaigns",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("budget", sa.Numeric(12, 2), nullable=True),
        _owner(),
        *_timestamps(),
        sa.CheckConstraint(
            "status IN ('draft', 'active', 'paused', 'completed')",
            name="ck_campaigns_status",
        ),
        sa.CheckConstraint("budget IS NULL OR budget >= 0", name="ck_campaigns_budget_non_negative"),
        sa.CheckConstraint(
            "start_date IS NULL OR end_date IS NULL OR end_date >= start_date",
            name="ck_campaigns_date_order",
        ),
    )
    op.create_index("ix_campaigns_owner_id", "campaigns", ["owner_id"])
    op.create_index("idx_campaigns_owner_status", "campaigns", ["owner_id", "status"])

    op.create_table(
        "messages",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("lead_id", sa.String(36), sa.ForeignKey("leads.id", ondelete="CASCADE"), nullable=False),
        sa.Column(
            "campaign_id",
            sa.String(36),
            sa.ForeignKey("campaigns.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        sa.Column("sent_at", sa.DateTime(timezone=True), nullable=True),
        _owner(),
        *_timestamps(),
        sa.CheckConstraint("type IN ('email', 'sms', 'call')", name="ck_messages_type"),
        sa.CheckConstraint(
            "status IN ('draft', 'sent', 'delivered', 'failed')",
            name="ck_messages_status",
        ),
    )
    op.create_index("ix_messages_owner_id", "messages", ["owner_id"])
    op.create_index("ix_messages_lead_id", "messages", ["lead_id"])
    op.create_index("ix_messages_campaign_id", "messages", ["campaign_id"])
    op.create_index("idx_messages_owner_lead", "messages", ["owner_id", "lead_id"])

    op.create_table(
        "files",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("type", sa.String(120), nullable=False),
        sa.Column("size", sa.BigInteger(), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        _owner(),
        *_timestamps(updated=False),
        sa.CheckConstraint("size >= 0", name="ck_files_size_non_negative"),
    )
    op.create_index("ix_files_owner_id", "files", ["owner_id"])


def downgrade() -> None:
    op.drop_table("files")
    op.drop_table("messages")
    op.drop_table("campaigns")
    op.drop_table("leads")
    op.drop_table("profiles")
    op.drop_table("identities")
