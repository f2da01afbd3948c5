"""File service. Only metadata is stored; object storage holds the content."""

from __future__ import annotations

from typing import Any

from app.auth.caller_context import CallerContext
from app.models.file import File
from app.repositories.file_repository import FileRepository
from app.services.base_service import BaseService, Page


class FileService(BaseService):
    def __init__(self, caller: CallerContext | None, db=None) -> None:
        super().__init__(db)
        self.repo = FileRepository(self.db, caller)

    def register_file(self, data: dict[str, Any]) -> File:
        record = self.repo.create(**data)
        self.commit()
        self.db.refresh(record)
        return record

    def get_file(self, file_id: str) -> File | None:
        return self.repo.get(file_id)

    def list_files(self, limit: int = 50, offset: int = 0) -> Page[File]:
        items = self.repo.list(order_by=(File.created_at.desc(), File.id), limit=limit, offset=offset)
        return Page(items=items, total=self.repo.count(), limit=limit, offset=offset)

    def delete_file(self, file_id: str) -> bool:
        deleted = self.repo.delete(file_id)
        self.commit()
        return deleted
