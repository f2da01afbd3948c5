"""File repository. File rows are registered and removed, never edited."""

from __future__ import annotations

from app.models.file import File
from app.repositories.base_repository import AuthorizedRepository


class FileRepository(AuthorizedRepository[File]):
    model = File
    allow_update = False
