"""Lead service: owner-scoped CRUD, filtering and search."""

from __future__ import annotations

import json
from typing import Any

from sqlalchemy import String, cast, or_

from app.auth.caller_context import CallerContext
from app.core.exceptions import ValidationError
from app.models.lead import Lead
from app.repositories.lead_repository import LeadRepository
from app.services.base_service import BaseService, Page
from app.utils.validators import normalize_email, normalize_tags, sanitize_text


def _prepare(data: dict[str, Any]) -> dict[str, Any]:
    payload = dict(data)
    if "tags" in payload:
        payload["tags"] = normalize_tags(payload["tags"])
    if "email" in payload:
        payload["email"] = normalize_email(payload["email"])
    for field in ("phone", "source", "notes"):
        if field in payload:
            payload[field] = sanitize_text(payload[field])
    if "name" in payload:
        name = sanitize_text(payload["name"], max_len=255)
        if name is None:
            raise ValidationError("Lead name must not be blank.")
        payload["name"] = name
    return payload


class LeadService(BaseService):
    """Service for lead CRUD scoped to the calling identity."""

    def __init__(self, caller: CallerContext | None, db=None) -> None:
        super().__init__(db)
        self.repo = LeadRepository(self.db, caller)

    def create_lead(self, data: dict[str, Any]) -> Lead:
        lead = self.repo.create(**_prepare(data))
        self.commit()
        self.db.refresh(lead)
        return lead

    def get_lead(self, lead_id: str) -> Lead | None:
        return self.repo.get(lead_id)

    def list_leads(
        self,
        status: str | None = None,
        source: str | None = None,
        tag: str | None = None,
        search: str | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Page[Lead]:
        criteria = []
        if status:
            criteria.append(Lead.status == status)
        if source:
            criteria.append(Lead.source == source)
        if tag and tag.strip():
            # Tags are stored as a JSON array; match the quoted element.
            criteria.append(cast(Lead.tags, String).contains(json.dumps(tag.strip()), autoescape=True))
        if search and search.strip():
            term = search.strip()
            criteria.append(
                or_(Lead.name.icontains(term, autoescape=True), Lead.email.icontains(term, autoescape=True))
            )
        items = self.repo.list(*criteria, order_by=(Lead.created_at.desc(), Lead.id), limit=limit, offset=offset)
        return Page(items=items, total=self.repo.count(*criteria), limit=limit, offset=offset)

    def update_lead(self, lead_id: str, changes: dict[str, Any]) -> Lead | None:
        lead = self.repo.update(lead_id, **_prepare(changes))
        if lead is None:
            return None
        self.commit()
        self.db.refresh(lead)
        return lead

    def delete_lead(self, lead_id: str) -> bool:
        deleted = self.repo.delete(lead_id)
        self.commit()
        return deleted
