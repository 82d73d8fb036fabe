from __future__ import annotations

from datetime import date, datetime, time
from zoneinfo import ZoneInfo


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local(tz: ZoneInfo | None = None) -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(tz)


def day_bounds(work_date: date) -> tuple[datetime, datetime]:
    """First and last instant of a calendar day (naive, local)."""
    return datetime.combine(work_date, time.min), datetime.combine(work_date, time.max)


def to_local(value: datetime, tz: ZoneInfo) -> datetime:
    """Convert an aware timestamp into tz; naive values are already local."""
    if value.tzinfo is None:
        return value
    return value.astimezone(tz)
