from __future__ import annotations

from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_utc_midnight_iso(value: date) -> str:
    """Serialize a date as the backend expects joining dates (UTC midnight)."""
    return f"{value.isoformat()}T00:00:00.000Z"


def today() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()
