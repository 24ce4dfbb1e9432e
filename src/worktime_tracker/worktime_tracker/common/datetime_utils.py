from __future__ import annotations

from datetime import date, datetime
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now()


def format_time(value: Optional[datetime], placeholder: str = "-") -> str:
    if value is None:
        return placeholder
    return value.strftime("%H:%M")


def format_date(value: date) -> str:
    """Short human date, e.g. 'Oct 19, 2026'."""
    return f"{value.strftime('%b')} {value.day}, {value.year}"


def format_long_date(value: date) -> str:
    return f"{value.strftime('%A, %B')} {value.day}, {value.year}"


def to_iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None
