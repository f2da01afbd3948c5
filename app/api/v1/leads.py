"""Lead endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.api.v1._authz import get_current_caller
from app.auth.caller_context import CallerContext
from app.core.dependencies import get_db_session
from app.core.exceptions import NotFoundError
from app.models.enums import LeadStatus
from app.schemas.leads import LeadCreateRequest, LeadResponse, LeadUpdateRequest
from app.services.lead_service import LeadService

router = APIRouter(prefix="/leads", tags=["leads"])


def _service(caller: CallerContext, db: Session) -> LeadService:
    return LeadService(caller, db=db)


@router.get("")
def list_leads(
    status_filter: LeadStatus | None = Query(default=None, alias="status"),
    source: str | None = Query(default=None, max_length=120),
    tag: str | None = Query(default=None, max_length=120),
    q: str | None = Query(default=None, max_length=255),
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
) -> dict:
    page = _service(caller, db).list_leads(
        status=status_filter.value if status_filter else None,
        source=source,
        tag=tag,
        search=q,
        limit=limit,
        offset=offset,
    )
    return {
        "items": [LeadResponse.model_validate(lead).model_dump(mode="json") for lead in page.items],
        "total": page.total,
        "limit": page.limit,
        "offset": page.offset,
    }


@router.post("", response_model=LeadResponse, status_code=status.HTTP_201_CREATED)
def create_lead(
    payload: LeadCreateRequest,
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
) -> LeadResponse:
    lead = _service(caller, db).create_lead(payload.model_dump())
    return LeadResponse.model_validate(lead)


@router.get("/{lead_id}", response_model=LeadResponse)
def get_lead(
    lead_id: str,
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
) -> LeadResponse:
    lead = _service(caller, db).get_lead(lead_id)
    if lead is None:
        raise NotFoundError(f"Lead not found: {lead_id}")
    return LeadResponse.model_validate(lead)


@router.patch("/{lead_id}", response_model=LeadResponse)
def update_lead(
    lead_id: str,
    payload: LeadUpdateRequest,
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
) -> LeadResponse:
    lead = _service(caller, db).update_lead(lead_id, payload.model_dump(exclude_unset=True))
    if lead is None:
        raise NotFoundError(f"Lead not found: {lead_id}")
    return LeadResponse.model_validate(lead)


@router.delete("/{lead_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_lead(
    lead_id: str,
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
) -> Response:
    if not _service(caller, db).delete_lead(lead_id):
        raise NotFoundError(f"Lead not found: {lead_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
