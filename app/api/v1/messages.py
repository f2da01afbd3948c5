"""Message endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.api.v1._authz import get_current_caller
from app.auth.caller_context import CallerContext
from app.core.dependencies import get_db_session
from app.core.exceptions import NotFoundError
from app.models.enums import MessageStatus, MessageType
from app.schemas.messages import MessageCreateRequest, MessageResponse, MessageUpdateRequest
from app.services.message_service import MessageService

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get("")
def list_messages(
    lead_id: str | None = Query(default=None, max_length=36),
    campaign_id: str | None = Query(default=None, max_length=36),
    message_type: MessageType | None = Query(default=None, alias="type"),
    status_filter: MessageStatus | None = Query(default=None, alias="status"),
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
) -> dict:
    page = MessageService(caller, db=db).list_messages(
        lead_id=lead_id,
        campaign_id=campaign_id,
        message_type=message_type.value if message_type else None,
        status=status_filter.value if status_filter else None,
        limit=limit,
        offset=offset,
    )
    return {
        "items": [MessageResponse.model_validate(item).model_dump(mode="json") for item in page.items],
        "total": page.total,
        "limit": page.limit,
        "offset": page.offset,
    }


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def create_message(
    payload: MessageCreateRequest,
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
) -> MessageResponse:
    message = MessageService(caller, db=db).create_message(payload.model_dump())
    return MessageResponse.model_validate(message)


@router.get("/{message_id}", response_model=MessageResponse)
def get_message(
    message_id: str,
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
) -> MessageResponse:
    message = MessageService(caller, db=db).get_message(message_id)
    if message is None:
        raise NotFoundError(f"Message not found: {message_id}")
    return MessageResponse.model_validate(message)


@router.patch("/{message_id}", response_model=MessageResponse)
def update_message(
    message_id: str,
    payload: MessageUpdateRequest,
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
) -> MessageResponse:
    message = MessageService(caller, db=db).update_message(message_id, payload.model_dump(exclude_unset=True))
    if message is None:
        raise NotFoundError(f"Message not found: {message_id}")
    return MessageResponse.model_validate(message)


@router.delete("/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_message(
    message_id: str,
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
) -> Response:
    if not MessageService(caller, db=db).delete_message(message_id):
        raise NotFoundError(f"Message not found: {message_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
