from __future__ import annotations

from datetime import date

from ..core.exceptions import ValidationError


def require_non_empty(value: str | None, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_date_range(start: date, end: date) -> None:
    if end < start:
        raise ValidationError("End date must be on or after start date")
