"""File model module."""

from __future__ import annotations

from sqlalchemy import BigInteger, CheckConstraint, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, CreatedAtMixin, OwnedMixin, UUIDPrimaryKeyMixin


class File(Base, UUIDPrimaryKeyMixin, CreatedAtMixin, OwnedMixin):
    """Metadata for an object kept in external storage; the bytes live at ``url``."""

    __tablename__ = "files"
    __table_args__ = (
        CheckConstraint("size >= 0", name="ck_files_size_non_negative"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(120), nullable=False)
    size: Mapped[int] = mapped_column(BigInteger, nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
