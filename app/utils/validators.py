"""Deterministic validators and sanitizers used by services and schemas."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from app.core.exceptions import ValidationError

CENT = Decimal("0.01")


def sanitize_text(value: str | None, max_len: int = 20000) -> str | None:
    """Sanitize free-form content before persistence; blank becomes None."""
    if value is None:
        return None
    cleaned = str(value).replace("\x00", "").strip()
    cleaned = cleaned[:max_len]
    return cleaned or None


def normalize_email(value: str | None) -> str | None:
    cleaned = sanitize_text(value, max_len=320)
    return cleaned.lower() if cleaned else None


def normalize_tags(tags: Iterable[str] | None) -> list[str]:
    """Reduce labels to a set: stripped, non-empty, de-duplicated, sorted."""
    if not tags:
        return []
    return sorted({tag.strip() for tag in tags if isinstance(tag, str) and tag.strip()})


def normalize_budget(value: Decimal | float | int | str | None) -> Decimal | None:
    """Non-negative amount rounded to cents; None stays None."""
    if value is None:
        return None
    try:
        amount = Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid budget amount: {value!r}") from exc
    if amount < 0:
        raise ValidationError("Budget must be non-negative.")
    return amount
