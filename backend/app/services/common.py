"""Helpers shared by the record services."""

from __future__ import annotations

from typing import Any, Iterable

from sqlalchemy import func, or_
from sqlalchemy.orm import Session


class RecordValidationError(ValueError):
    """Raised when a write would leave a record in an invalid state."""


def apply_updates(record: Any, update_data: dict, *, nullable: Iterable[str] = ()) -> None:
    """Copy ``update_data`` onto ``record``, refusing nulls for required fields."""

    allowed_nulls = set(nullable)
    for field, value in update_data.items():
        if value is None and field not in allowed_nulls:
            raise RecordValidationError(f"{field} cannot be null")
        setattr(record, field, value)


def search_filter(search: str, *columns: Any):
    """Case-insensitive ``LIKE`` across ``columns``."""

    pattern = f"%{search.strip().lower()}%"
    return or_(*(func.lower(column).like(pattern) for column in columns))


def ensure_exists(db: Session, model: Any, record_id: str, label: str) -> None:
    """Raise :class:`RecordValidationError` unless ``model`` has a row with ``record_id``."""

    if db.query(model.id).filter(model.id == record_id).first() is None:
        raise RecordValidationError(f"{label} {record_id} does not exist")
