"""Helpers for turning result rows into domain values."""

from datetime import datetime, timezone
from typing import Any

from domain.model.user import PublicContact


def as_datetime(value: Any) -> datetime | None:
    """Normalise a timestamp column. SQLite hands back ISO-8601 strings in UTC."""
    if value is None or isinstance(value, datetime):
        return value
    parsed = datetime.fromisoformat(str(value))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def contact_from_row(row: dict[str, Any]) -> PublicContact:
    """Build the counterpart contact from LEFT JOINed user columns (all None if absent)."""
    return PublicContact(
        username=row.get('username'),
        first_name=row.get('first_name'),
        last_name=row.get('last_name'),
        phone=row.get('phone'),
    )
