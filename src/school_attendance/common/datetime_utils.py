from __future__ import annotations

from datetime import date, datetime

from ..core.constants import DATE_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def require_iso_date(value: str, field_name: str = "date") -> str:
    """Check that value is a YYYY-MM-DD string and return it unchanged."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    try:
        parsed = parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be in YYYY-MM-DD format") from None
    # strptime accepts "2024-1-5"; stored dates must compare as strings.
    if parsed.strftime(DATE_FORMAT) != value:
        raise ValidationError(f"{field_name} must be in YYYY-MM-DD format")
    return value


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now()


def today_iso(now: datetime | None = None) -> str:
    return (now or now_local()).strftime(DATE_FORMAT)
