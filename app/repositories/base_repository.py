"""
Authorized repository: row-ownership enforcement in front of every persistence call.

Every query issued through a repository is filtered by the caller's identity,
and every write is checked against it. Rows owned by someone else are never
returned and never touched; to the caller they behave exactly like rows that
do not exist.
"""

from __future__ import annotations

import enum
import logging
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import ColumnElement, Select, delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.auth.caller_context import CallerContext, enforce_owner_match, require_caller
from app.core.exceptions import AuthorizationError, ConstraintViolationError, ValidationError
from app.models.base import as_utc, utcnow

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _column_value(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    return value


class AuthorizedRepository(Generic[T]):
    """
    Generic CRUD gated by an ownership predicate.

    read/update/delete: only rows whose owner column equals the caller.
    insert: only when the owner column being written equals the caller.
    """

    model: ClassVar[type]
    owner_column: ClassVar[str] = "owner_id"
    readonly_fields: ClassVar[frozenset[str]] = frozenset({"id", "created_at", "updated_at"})
    allow_update: ClassVar[bool] = True

    def __init__(self, session: Session, caller: CallerContext | None):
        self.session = session
        self.caller = require_caller(caller)

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    @property
    def _owner(self):
        return getattr(self.model, self.owner_column)

    def _log_denied(self, operation: str, reason: str, row_id: str | None = None) -> None:
        logger.warning(
            "access.%s.denied",
            operation,
            extra={
                "event": f"access.{operation}.denied",
                "identity_id": self.caller.identity_id,
                "table": self.table_name,
                "operation": operation,
                "row_id": row_id,
                "reason": reason,
            },
        )

    def _check_columns(self, values: dict[str, Any]) -> None:
        columns = set(self.model.__table__.columns.keys())
        unknown = sorted(set(values) - columns)
        if unknown:
            raise ValidationError(f"Unknown {self.table_name} field(s): {', '.join(unknown)}")

    def _check_writable(self, operation: str, values: dict[str, Any], row_id: str | None = None) -> None:
        for field in values:
            if field == self.owner_column:
                continue
            if field in self.readonly_fields:
                self._log_denied(operation, f"readonly:{field}", row_id)
                raise AuthorizationError(f"Field is not writable: {field}")

    def _check_references(self, values: dict[str, Any]) -> None:
        """Hook for subclasses whose rows point at other owned rows."""

    def _flush(self, operation: str) -> None:
        try:
            self.session.flush()
        except IntegrityError as exc:
            self.session.rollback()
            logger.warning(
                "access.%s.constraint_violation",
                operation,
                extra={
                    "event": f"access.{operation}.constraint_violation",
                    "identity_id": self.caller.identity_id,
                    "table": self.table_name,
                    "operation": operation,
                    "reason": str(exc.orig),
                },
            )
            raise ConstraintViolationError(f"{self.table_name} {operation} violates a constraint.") from exc

    # READ

    def scoped(self) -> Select:
        """SELECT over the caller's rows only."""
        return select(self.model).where(self._owner == self.caller.identity_id)

    def get(self, row_id: str) -> T | None:
        stmt = self.scoped().where(self.model.id == row_id)
        return self.session.execute(stmt).scalar_one_or_none()

    def list(
        self,
        *criteria: ColumnElement[bool],
        order_by: Any = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[T]:
        stmt = self.scoped().where(*criteria)
        if isinstance(order_by, (list, tuple)):
            stmt = stmt.order_by(*order_by)
        elif order_by is not None:
            stmt = stmt.order_by(order_by)
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.session.execute(stmt).scalars().all())

    def count(self, *criteria: ColumnElement[bool]) -> int:
        stmt = (
            select(func.count())
            .select_from(self.model)
            .where(self._owner == self.caller.identity_id, *criteria)
        )
        return int(self.session.execute(stmt).scalar_one())

    def count_by(self, column: Any, *criteria: ColumnElement[bool]) -> dict[Any, int]:
        """Row counts grouped by ``column`` over the caller's rows."""
        stmt = (
            select(column, func.count())
            .where(self._owner == self.caller.identity_id, *criteria)
            .group_by(column)
        )
        return {key: int(total) for key, total in self.session.execute(stmt).all()}

    def total(self, column: Any, *criteria: ColumnElement[bool]) -> Any:
        """SUM of ``column`` over the caller's rows; None when nothing matches."""
        stmt = select(func.sum(column)).where(self._owner == self.caller.identity_id, *criteria)
        return self.session.execute(stmt).scalar_one()

    # CREATE

    def create(self, **values: Any) -> T:
        values = {key: _column_value(value) for key, value in values.items()}
        self._check_columns(values)
        self._check_writable("insert", values)
        values.setdefault(self.owner_column, self.caller.identity_id)
        try:
            enforce_owner_match(values[self.owner_column], self.caller)
        except AuthorizationError:
            self._log_denied("insert", "owner_mismatch")
            raise
        self._check_references(values)

        entity = self.model(**values)
        self.session.add(entity)
        self._flush("insert")
        logger.debug("Created %s %s", self.table_name, entity.id)
        return entity

    # UPDATE

    def update(self, row_id: str, **changes: Any) -> T | None:
        """Apply changes to an owned row; returns None when the row is not visible."""
        if not self.allow_update:
            self._log_denied("update", "immutable_table", row_id)
            raise AuthorizationError(f"{self.table_name} rows cannot be updated.")

        changes = {key: _column_value(value) for key, value in changes.items()}
        self._check_columns(changes)
        self._check_writable("update", changes, row_id)

        entity = self.get(row_id)
        if entity is None:
            return None

        if self.owner_column in changes:
            try:
                enforce_owner_match(changes.pop(self.owner_column), self.caller)
            except AuthorizationError:
                self._log_denied("update", "owner_mismatch", row_id)
                raise
        self._check_references(changes)

        for field, value in changes.items():
            setattr(entity, field, value)
        if hasattr(entity, "updated_at") and entity.updated_at is not None:
            entity.updated_at = max(utcnow(), as_utc(entity.updated_at))
        self._flush("update")
        return entity

    # DELETE

    def delete(self, row_id: str) -> bool:
        """Delete an owned row; False means zero rows were affected."""
        stmt = (
            delete(self.model)
            .where(self.model.id == row_id, self._owner == self.caller.identity_id)
            .execution_options(synchronize_session=False)
        )
        try:
            result = self.session.execute(stmt)
        except IntegrityError as exc:
            self.session.rollback()
            logger.warning(
                "access.delete.constraint_violation",
                extra={
                    "event": "access.delete.constraint_violation",
                    "identity_id": self.caller.identity_id,
                    "table": self.table_name,
                    "operation": "delete",
                    "row_id": row_id,
                    "reason": str(exc.orig),
                },
            )
            raise ConstraintViolationError(f"{self.table_name} delete violates a constraint.") from exc
        return result.rowcount > 0
