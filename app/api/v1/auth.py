"""Auth endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.v1._authz import get_current_caller
from app.auth.caller_context import CallerContext
from app.core.config import Config
from app.core.dependencies import get_db_session, get_settings
from app.core.exceptions import NotFoundError
from app.schemas.auth import LoginRequest, RefreshRequest, SignUpRequest, SignUpResponse, TokenResponse
from app.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=SignUpResponse, status_code=status.HTTP_201_CREATED)
def signup(
    payload: SignUpRequest,
    db: Session = Depends(get_db_session),
    settings: Config = Depends(get_settings),
) -> SignUpResponse:
    identity, tokens = AuthService(db=db, settings=settings).sign_up(
        email=payload.email,
        password=payload.password,
        metadata=payload.user_metadata(),
    )
    return SignUpResponse(
        identity_id=identity.id,
        access_token=tokens.access_token,
        refresh_token=tokens.refresh_token,
        token_type=tokens.token_type,
    )


@router.post("/login", response_model=TokenResponse)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db_session),
    settings: Config = Depends(get_settings),
) -> TokenResponse:
    tokens = AuthService(db=db, settings=settings).sign_in(email=payload.email, password=payload.password)
    return TokenResponse(
        access_token=tokens.access_token,
        refresh_token=tokens.refresh_token,
        token_type=tokens.token_type,
    )


@router.post("/refresh", response_model=TokenResponse)
def refresh(
    payload: RefreshRequest,
    db: Session = Depends(get_db_session),
    settings: Config = Depends(get_settings),
) -> TokenResponse:
    tokens = AuthService(db=db, settings=settings).refresh(payload.refresh_token)
    return TokenResponse(
        access_token=tokens.access_token,
        refresh_token=tokens.refresh_token,
        token_type=tokens.token_type,
    )


@router.delete("/account", status_code=status.HTTP_204_NO_CONTENT)
def delete_account(
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
    settings: Config = Depends(get_settings),
) -> Response:
    if not AuthService(db=db, settings=settings).delete_account(caller):
        raise NotFoundError("Account not found.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
