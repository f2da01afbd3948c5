from __future__ import annotations

import pytest
from sqlalchemy import func, select

from app.auth.caller_context import CallerContext
from app.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConstraintViolationError,
    ValidationError,
)
from app.models import Campaign, File, Lead, Message, Profile
from app.repositories import (
    CampaignRepository,
    FileRepository,
    LeadRepository,
    MessageRepository,
    ProfileRepository,
)


def _count(db, model) -> int:
    return db.execute(select(func.count()).select_from(model)).scalar_one()


def test_scenario_lead_visible_only_to_owner(db, make_caller):
    u1 = make_caller("u1@example.com")
    u2 = make_caller("u2@example.com")

    profile = ProfileRepository(db, u1).get_own()
    assert profile.id == u1.identity_id
    assert profile.role == "free"

    LeadRepository(db, u1).create(name="Jane", email="jane@x.com", source="web", owner_id=u1.identity_id)
    db.commit()

    assert len(LeadRepository(db, u1).list()) == 1
    assert LeadRepository(db, u2).list() == []
    assert LeadRepository(db, u2).count() == 0


@pytest.mark.parametrize(
    "repository_cls",
    [LeadRepository, CampaignRepository, MessageRepository, FileRepository, ProfileRepository],
)
def test_unauthenticated_caller_is_rejected(db, repository_cls):
    with pytest.raises(AuthenticationError):
        repository_cls(db, None)


def test_reads_of_foreign_rows_look_like_missing_rows(db, make_caller):
    u1 = make_caller("u1@example.com")
    u2 = make_caller("u2@example.com")
    lead = LeadRepository(db, u1).create(name="Jane")
    db.commit()

    assert LeadRepository(db, u2).get(lead.id) is None
    assert LeadRepository(db, u2).get("no-such-id") is None
    assert ProfileRepository(db, u2).get(u1.identity_id) is None


def test_update_and_delete_of_foreign_rows_affect_nothing(db, make_caller):
    u1 = make_caller("u1@example.com")
    u2 = make_caller("u2@example.com")
    lead = LeadRepository(db, u1).create(name="Jane", status="new")
    db.commit()
    lead_id = lead.id

    assert LeadRepository(db, u2).update(lead_id, status="lost") is None
    assert LeadRepository(db, u2).delete(lead_id) is False
    db.commit()

    stored = LeadRepository(db, u1).get(lead_id)
    assert stored is not None
    assert stored.status == "new"


def test_insert_for_another_owner_is_rejected(db, make_caller):
    u1 = make_caller("u1@example.com")
    u2 = make_caller("u2@example.com")

    with pytest.raises(AuthorizationError):
        LeadRepository(db, u1).create(name="Spoof", owner_id=u2.identity_id)
    db.rollback()

    assert _count(db, Lead) == 0


def test_insert_defaults_owner_to_caller(db, make_caller):
    u1 = make_caller("u1@example.com")
    campaign = CampaignRepository(db, u1).create(name="Spring push")
    db.commit()
    assert campaign.owner_id == u1.identity_id
    assert campaign.status == "draft"


def test_update_cannot_move_row_to_another_owner(db, make_caller):
    u1 = make_caller("u1@example.com")
    u2 = make_caller("u2@example.com")
    lead = LeadRepository(db, u1).create(name="Jane")
    db.commit()

    with pytest.raises(AuthorizationError):
        LeadRepository(db, u1).update(lead.id, owner_id=u2.identity_id)
    db.rollback()

    assert LeadRepository(db, u1).get(lead.id) is not None
    assert LeadRepository(db, u2).get(lead.id) is None


def test_server_assigned_fields_are_not_writable(db, make_caller):
    u1 = make_caller("u1@example.com")
    lead = LeadRepository(db, u1).create(name="Jane")
    db.commit()

    with pytest.raises(AuthorizationError):
        LeadRepository(db, u1).update(lead.id, created_at=None)
    with pytest.raises(AuthorizationError):
        LeadRepository(db, u1).create(name="Jane", id="chosen-id")


def test_unknown_fields_are_rejected(db, make_caller):
    u1 = make_caller("u1@example.com")
    with pytest.raises(ValidationError):
        LeadRepository(db, u1).create(name="Jane", score=10)


def test_profile_owner_can_edit_display_fields_but_not_role(db, make_caller):
    u1 = make_caller("u1@example.com")
    repo = ProfileRepository(db, u1)

    updated = repo.update(u1.identity_id, full_name="Uma One")
    db.commit()
    assert updated.full_name == "Uma One"

    with pytest.raises(AuthorizationError):
        repo.update(u1.identity_id, role="admin")
    db.rollback()
    assert repo.get_own().role == "free"


def test_files_cannot_be_updated(db, make_caller):
    u1 = make_caller("u1@example.com")
    record = FileRepository(db, u1).create(name="deck.pdf", type="application/pdf", size=1024, url="s3://b/deck.pdf")
    db.commit()

    with pytest.raises(AuthorizationError):
        FileRepository(db, u1).update(record.id, name="renamed.pdf")


def test_deleting_profile_cascades_all_owned_rows(db, make_caller):
    u1 = make_caller("u1@example.com")
    u2 = make_caller("u2@example.com")
    for caller in (u1, u2):
        lead = LeadRepository(db, caller).create(name="Jane")
        campaign = CampaignRepository(db, caller).create(name="Launch")
        MessageRepository(db, caller).create(lead_id=lead.id, campaign_id=campaign.id, type="email", content="Hi")
        FileRepository(db, caller).create(name="a.csv", type="text/csv", size=10, url="s3://b/a.csv")
    db.commit()

    assert ProfileRepository(db, u1).delete(u1.identity_id) is True
    db.commit()

    for model in (Lead, Campaign, Message, File):
        owners = set(db.execute(select(model.owner_id)).scalars())
        assert owners == {u2.identity_id}
    assert set(db.execute(select(Profile.id)).scalars()) == {u2.identity_id}


def test_referential_integrity_holds_for_every_owned_row(db, make_caller):
    u1 = make_caller("u1@example.com")
    lead = LeadRepository(db, u1).create(name="Jane")
    MessageRepository(db, u1).create(lead_id=lead.id, type="sms", content="Hello")
    db.commit()

    profile_ids = set(db.execute(select(Profile.id)).scalars())
    for model in (Lead, Campaign, Message, File):
        assert set(db.execute(select(model.owner_id)).scalars()) <= profile_ids


def test_caller_without_profile_cannot_insert(db):
    ghost = CallerContext(identity_id="00000000-0000-0000-0000-000000000000")
    with pytest.raises(ConstraintViolationError) as excinfo:
        LeadRepository(db, ghost).create(name="Orphan")
    assert str(excinfo.value) == "leads insert violates a constraint."
    assert _count(db, Lead) == 0
