"""File metadata endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.api.v1._authz import get_current_caller
from app.auth.caller_context import CallerContext
from app.core.dependencies import get_db_session
from app.core.exceptions import NotFoundError
from app.schemas.files import FileCreateRequest, FileResponse
from app.services.file_service import FileService

router = APIRouter(prefix="/files", tags=["files"])


@router.get("")
def list_files(
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
) -> dict:
    page = FileService(caller, db=db).list_files(limit=limit, offset=offset)
    return {
        "items": [FileResponse.model_validate(item).model_dump(mode="json") for item in page.items],
        "total": page.total,
        "limit": page.limit,
        "offset": page.offset,
    }


@router.post("", response_model=FileResponse, status_code=status.HTTP_201_CREATED)
def register_file(
    payload: FileCreateRequest,
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
) -> FileResponse:
    record = FileService(caller, db=db).register_file(payload.model_dump())
    return FileResponse.model_validate(record)


@router.get("/{file_id}", response_model=FileResponse)
def get_file(
    file_id: str,
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
) -> FileResponse:
    record = FileService(caller, db=db).get_file(file_id)
    if record is None:
        raise NotFoundError(f"File not found: {file_id}")
    return FileResponse.model_validate(record)


@router.delete("/{file_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_file(
    file_id: str,
    caller: CallerContext = Depends(get_current_caller),
    db: Session = Depends(get_db_session),
) -> Response:
    if not FileService(caller, db=db).delete_file(file_id):
        raise NotFoundError(f"File not found: {file_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
