"""Reporting endpoints for API v1."""

from __future__ import annotations

from decimal import Decimal

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from sqlalchemy.orm import Session

from app.api.v1._authz import get_current_caller
from app.auth.caller_context import CallerContext
from app.core.dependencies import get_db_session
from app.services.report_service import ReportService

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/summary")
def summary(
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
) -> dict:
    return jsonable_encoder(ReportService(caller, db=db).summary(), custom_encoder={Decimal: str})
