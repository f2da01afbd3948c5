"""Bring the configured database up to the latest schema revision."""

from __future__ import annotations

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config as AlembicConfig

from app.core.startup import bootstrap
import app.database.db as db_module

PROJECT_ROOT = Path(__file__).resolve().parents[2]

logger = logging.getLogger(__name__)


def build_alembic_config(database_url: str) -> AlembicConfig:
    cfg = AlembicConfig(str(PROJECT_ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    cfg.set_main_option("sqlalchemy.url", database_url)
    cfg.attributes["url_from_caller"] = True
    cfg.attributes["configure_logger"] = False
    return cfg


def upgrade_to_head(database_url: str | None = None) -> None:
    """Apply every pending migration to ``database_url`` (default: active URL)."""
    url = database_url or db_module.get_active_database_url()
    command.upgrade(build_alembic_config(url), "head")
    logger.info(
        "database.migrations.applied scheme=%s",
        url.split("://", 1)[0],
        extra={"event": "database.migrations.applied"},
    )


def init_db() -> None:
    bootstrap()
    upgrade_to_head()


if __name__ == "__main__":
    init_db()
