"""Campaign endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.api.v1._authz import get_current_caller
from app.auth.caller_context import CallerContext
from app.core.dependencies import get_db_session
from app.core.exceptions import NotFoundError
from app.models.enums import CampaignStatus
from app.schemas.campaigns import CampaignCreateRequest, CampaignResponse, CampaignUpdateRequest
from app.services.campaign_service import CampaignService

router = APIRouter(prefix="/campaigns", tags=["campaigns"])


@router.get("")
def list_campaigns(
    status_filter: CampaignStatus | None = Query(default=None, alias="status"),
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
) -> dict:
    page = CampaignService(caller, db=db).list_campaigns(
        status=status_filter.value if status_filter else None,
        limit=limit,
        offset=offset,
    )
    return {
        "items": [CampaignResponse.model_validate(item).model_dump(mode="json") for item in page.items],
        "total": page.total,
        "limit": page.limit,
        "offset": page.offset,
    }


@router.post("", response_model=CampaignResponse, status_code=status.HTTP_201_CREATED)
def create_campaign(
    payload: CampaignCreateRequest,
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
) -> CampaignResponse:
    campaign = CampaignService(caller, db=db).create_campaign(payload.model_dump())
    return CampaignResponse.model_validate(campaign)


@router.get("/{campaign_id}", response_model=CampaignResponse)
def get_campaign(
    campaign_id: str,
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
) -> CampaignResponse:
    campaign = CampaignService(caller, db=db).get_campaign(campaign_id)
    if campaign is None:
        raise NotFoundError(f"Campaign not found: {campaign_id}")
    return CampaignResponse.model_validate(campaign)


@router.patch("/{campaign_id}", response_model=CampaignResponse)
def update_campaign(
    campaign_id: str,
    payload: CampaignUpdateRequest,
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
) -> CampaignResponse:
    campaign = CampaignService(caller, db=db).update_campaign(campaign_id, payload.model_dump(exclude_unset=True))
    if campaign is None:
        raise NotFoundError(f"Campaign not found: {campaign_id}")
    return CampaignResponse.model_validate(campaign)


@router.delete("/{campaign_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_campaign(
    campaign_id: str,
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
) -> Response:
    if not CampaignService(caller, db=db).delete_campaign(campaign_id):
        raise NotFoundError(f"Campaign not found: {campaign_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
