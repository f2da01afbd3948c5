from __future__ import annotations

import pytest
from sqlalchemy import inspect, select, text
from sqlalchemy.exc import IntegrityError

from app.database.db import build_engine, build_session_factory
from app.database.init_db import upgrade_to_head
from app.models import Base, Profile
from app.services.provisioning_service import ProvisioningService

TABLES = {"identities", "profiles", "leads", "campaigns", "messages", "files"}


def test_metadata_declares_all_tables():
    assert TABLES <= set(Base.metadata.tables)


def test_owned_tables_reference_profiles_with_cascade():
    for name in ("leads", "campaigns", "messages", "files"):
        owner_fk = next(fk for fk in Base.metadata.tables[name].foreign_keys if fk.parent.name == "owner_id")
        assert owner_fk.column.table.name == "profiles"
        assert owner_fk.ondelete == "CASCADE"


def test_sqlite_engine_enforces_foreign_keys(engine):
    with engine.connect() as connection:
        assert connection.execute(text("PRAGMA foreign_keys")).scalar_one() == 1


@pytest.fixture
def migrated_engine(tmp_path):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    upgrade_to_head(url)
    engine = build_engine(url)
    yield engine
    engine.dispose()


def test_migrations_create_schema(migrated_engine):
    inspector = inspect(migrated_engine)
    assert TABLES <= set(inspector.get_table_names())
    lead_indexes = {index["name"] for index in inspector.get_indexes("leads")}
    assert "idx_leads_owner_status" in lead_indexes


def test_migrated_schema_provisions_and_checks(migrated_engine):
    session = build_session_factory(migrated_engine)()
    try:
        identity = ProvisioningService(db=session).create_identity(email="m@example.com", hashed_password="x")
        assert session.execute(select(Profile.role).where(Profile.id == identity.id)).scalar_one() == "free"

        with pytest.raises(IntegrityError):
            session.execute(
                text(
                    "INSERT INTO leads (id, name, tags, status, owner_id, created_at, updated_at) "
                    "VALUES ('l1', 'Jane', '[]', 'won', :owner, CURRENT_TIMESTAMP, CURRENT_TIMESTAMP)"
                ),
                {"owner": identity.id},
            )
        session.rollback()
    finally:
        session.close()
