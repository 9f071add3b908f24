from __future__ import annotations

from ..core.constants import MAX_YEAR, MIN_YEAR
from ..core.exceptions import InvalidPeriod


def require_month_index(value: int, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 11:
        raise InvalidPeriod(f"{field_name} must be a month index in 0..11, got {value!r}")
    return value


def require_year(value: int, field_name: str = "year") -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not MIN_YEAR <= value <= MAX_YEAR:
        raise InvalidPeriod(f"{field_name} must be a Gregorian year in {MIN_YEAR}..{MAX_YEAR}, got {value!r}")
    return value
