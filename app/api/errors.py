"""Translation of domain exceptions into HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConstraintViolationError,
    LeadPulseException,
    NotFoundError,
    ValidationError,
)
from app.schemas.common import ErrorEnvelope

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: tuple[tuple[type[LeadPulseException], int, str], ...] = (
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED, "authentication_failed"),
    (AuthorizationError, status.HTTP_403_FORBIDDEN, "forbidden"),
    (NotFoundError, status.HTTP_404_NOT_FOUND, "not_found"),
    (ConstraintViolationError, status.HTTP_409_CONFLICT, "constraint_violation"),
    (ValidationError, 422, "validation_failed"),
)


def map_domain_error(exc: Exception) -> tuple[int, str]:
    for error_type, code, error_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return code, error_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error"


async def domain_exception_handler(request: Request, exc: LeadPulseException) -> JSONResponse:
    code, error_code = map_domain_error(exc)
    if code >= 500:
        logger.error("api.domain_error", extra={"event": "api.domain_error", "reason": str(exc)})
    headers = {"WWW-Authenticate": "Bearer"} if code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(
        status_code=code,
        content=ErrorEnvelope(error_code=error_code, detail=str(exc)).model_dump(),
        headers=headers,
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LeadPulseException, domain_exception_handler)
