from __future__ import annotations

import calendar
from datetime import date, datetime

from ..core.constants import BUDDHIST_ERA_OFFSET, THAI_MONTHS, THAI_WEEKDAYS


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_iso(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def last_day_of_month(year: int, month0: int) -> date:
    """Last calendar day of a zero-based month (leap years included)."""
    return date(year, month0 + 1, calendar.monthrange(year, month0 + 1)[1])


def month_key(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}"


def buddhist_year(year: int) -> int:
    return year + BUDDHIST_ERA_OFFSET


def thai_month_year(year: int, month0: int) -> str:
    return f"{THAI_MONTHS[month0]} {buddhist_year(year)}"


def thai_long_date(value: date, *, weekday: bool = True) -> str:
    """e.g. 'วันพุธ 1 มกราคม 2568'."""
    text = f"{value.day} {THAI_MONTHS[value.month - 1]} {buddhist_year(value.year)}"
    if weekday:
        text = f"วัน{THAI_WEEKDAYS[value.weekday()]} {text}"
    return text


def export_timestamp(moment: datetime) -> str:
    """ISO timestamp safe for filenames: 2025-01-31T08-30-00."""
    return moment.isoformat(timespec="seconds").replace(":", "-")
