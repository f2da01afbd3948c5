"""Identifier generation helpers."""

from __future__ import annotations

import uuid


def new_row_id() -> str:
    """Create a UUID4-based primary key for identities and owned rows."""
    return str(uuid.uuid4())
