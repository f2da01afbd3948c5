from __future__ import annotations

import pytest
from sqlalchemy import func, select

from app.core.exceptions import ConstraintViolationError, ValidationError
from app.models import Lead
from app.services.lead_service import LeadService


def test_create_lead_normalizes_fields(db, make_caller):
    u1 = make_caller("u1@example.com")
    lead = LeadService(u1, db=db).create_lead(
        {"name": "  Jane Doe ", "email": "Jane@X.com", "tags": ["vip", " b2b", "vip", ""], "source": "web"}
    )

    assert lead.name == "Jane Doe"
    assert lead.email == "jane@x.com"
    assert lead.tags == ["b2b", "vip"]
    assert lead.status == "new"
    assert lead.owner_id == u1.identity_id
    assert lead.created_at is not None


def test_invalid_status_is_rejected_and_nothing_is_stored(db, make_caller):
    u1 = make_caller("u1@example.com")

    with pytest.raises(ConstraintViolationError):
        LeadService(u1, db=db).create_lead({"name": "Jane", "status": "won"})

    assert db.execute(select(func.count()).select_from(Lead)).scalar_one() == 0



def test_list_filters_and_search(db, make_caller):
    u1 = make_caller("u1@example.com")
    service = LeadService(u1, db=db)
    service.create_lead({"name": "Jane", "email": "jane@acme.io", "source": "web", "tags": ["vip"]})
    service.create_lead({"name": "John", "source": "referral", "status": "contacted", "tags": ["vipx"]})
    service.create_lead({"name": "Ana 100%", "source": "web", "status": "qualified"})

    assert {lead.name for lead in service.list_leads(source="web").items} == {"Jane", "Ana 100%"}
    assert [lead.name for lead in service.list_leads(status="contacted").items] == ["John"]
    assert [lead.name for lead in service.list_leads(tag="vip").items] == ["Jane"]
    assert [lead.name for lead in service.list_leads(search="ACME").items] == ["Jane"]
    assert [lead.name for lead in service.list_leads(search="100%").items] == ["Ana 100%"]
    assert service.list_leads(search="%").total == 1


def test_list_is_paginated_with_total(db, make_caller):
    u1 = make_caller("u1@example.com")
    service = LeadService(u1, db=db)
    for index in range(5):
        service.create_lead({"name": f"Lead {index}"})

    first = service.list_leads(limit=2, offset=0)
    last = service.list_leads(limit=2, offset=4)

    assert first.total == 5
    assert len(first.items) == 2
    assert len(last.items) == 1
    seen = {lead.id for lead in first.items} | {lead.id for lead in service.list_leads(limit=2, offset=2).items}
    assert len(seen | {lead.id for lead in last.items}) == 5


def test_update_advances_updated_at(db, make_caller):
    u1 = make_caller("u1@example.com")
    service = LeadService(u1, db=db)
    lead = service.create_lead({"name": "Jane"})
    before = lead.updated_at

    updated = service.update_lead(lead.id, {"status": "qualified", "tags": ["hot"]})

    assert updated.status == "qualified"
    assert updated.tags == ["hot"]
    assert updated.updated_at >= before


def test_other_callers_cannot_see_or_change_leads(db, make_caller):
    u1 = make_caller("u1@example.com")
    u2 = make_caller("u2@example.com")
    lead = LeadService(u1, db=db).create_lead({"name": "Jane"})
    other = LeadService(u2, db=db)

    assert other.get_lead(lead.id) is None
    assert other.list_leads().total == 0
    assert other.update_lead(lead.id, {"name": "Stolen"}) is None
    assert other.delete_lead(lead.id) is False
    assert LeadService(u1, db=db).get_lead(lead.id).name == "Jane"


def test_delete_lead(db, make_caller):
    u1 = make_caller("u1@example.com")
    service = LeadService(u1, db=db)
    lead_id = service.create_lead({"name": "Jane"}).id

    assert service.delete_lead(lead_id) is True
    assert service.get_lead(lead_id) is None
    assert service.delete_lead(lead_id) is False


@pytest.mark.parametrize("name", ["", "   ", "\x00 "])
def test_blank_name_is_rejected(db, make_caller, name):
    u1 = make_caller("u1@example.com")
    with pytest.raises(ValidationError):
        LeadService(u1, db=db).create_lead({"name": name})
    assert db.execute(select(func.count()).select_from(Lead)).scalar_one() == 0


def test_update_to_blank_name_is_rejected(db, make_caller):
    u1 = make_caller("u1@example.com")
    service = LeadService(u1, db=db)
    lead_id = service.create_lead({"name": "Jane"}).id

    with pytest.raises(ValidationError):
        service.update_lead(lead_id, {"name": "  "})
    assert service.get_lead(lead_id).name == "Jane"
