"""Own-profile endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.v1._authz import get_current_caller
from app.auth.caller_context import CallerContext
from app.core.dependencies import get_db_session
from app.core.exceptions import NotFoundError
from app.schemas.profiles import ProfileResponse, ProfileUpdateRequest
from app.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=ProfileResponse)
def get_profile(
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
) -> ProfileResponse:
    profile = ProfileService(caller, db=db).get_profile()
    if profile is None:
        raise NotFoundError("Profile not found.")
    return ProfileResponse.model_validate(profile)


@router.patch("", response_model=ProfileResponse)
def update_profile(
    payload: ProfileUpdateRequest,
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
) -> ProfileResponse:
    profile = ProfileService(caller, db=db).update_profile(payload.model_dump(exclude_unset=True))
    if profile is None:
        raise NotFoundError("Profile not found.")
    return ProfileResponse.model_validate(profile)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def delete_profile(
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
) -> Response:
    if not ProfileService(caller, db=db).delete_profile():
        raise NotFoundError("Profile not found.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
