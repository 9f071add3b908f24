"""Period selection -> concrete date interval.

All arithmetic is Gregorian. The Buddhist-era year only appears in labels.
Month ranges whose end precedes their start are rejected (`InvalidPeriod`);
ranges crossing a year boundary must say so with `to_year`.
"""

from __future__ import annotations

from datetime import date, datetime

from ..common.datetime_utils import buddhist_year, last_day_of_month, thai_long_date, thai_month_year
from ..common.validators import require_month_index, require_year
from ..core.constants import THAI_MONTHS
from ..core.enums import PersonRange
from ..core.exceptions import InvalidPeriod
from .model import DaySelection, MonthRangeSelection, PeriodSelection, ResolvedInterval, YearSelection


def resolve(selection: PeriodSelection) -> ResolvedInterval:
    if isinstance(selection, DaySelection):
        return _resolve_day(selection)
    if isinstance(selection, MonthRangeSelection):
        return _resolve_month_range(selection)
    if isinstance(selection, YearSelection):
        return _resolve_year(selection)
    raise InvalidPeriod(f"Unsupported period selection: {selection!r}")


def _resolve_day(selection: DaySelection) -> ResolvedInterval:
    if not isinstance(selection.date, date) or isinstance(selection.date, datetime):
        raise InvalidPeriod(f"day selection needs a calendar date, got {selection.date!r}")
    require_year(selection.date.year)
    return ResolvedInterval(start=selection.date, end=selection.date, label=thai_long_date(selection.date))


def _resolve_year(selection: YearSelection) -> ResolvedInterval:
    year = require_year(selection.year)
    return ResolvedInterval(
        start=date(year, 1, 1),
        end=date(year, 12, 31),
        label=f"ปี {buddhist_year(year)}",
    )


def _resolve_month_range(selection: MonthRangeSelection) -> ResolvedInterval:
    year = require_year(selection.year)
    end_year = require_year(selection.end_year, "to_year")
    from_month = require_month_index(selection.from_month, "from_month")
    to_month = require_month_index(selection.to_month, "to_month")

    if (end_year, to_month) < (year, from_month):
        raise InvalidPeriod(
            f"month range ends before it starts: {year}-{from_month + 1:02d} > {end_year}-{to_month + 1:02d}"
        )

    start = date(year, from_month + 1, 1)
    end = last_day_of_month(end_year, to_month)
    return ResolvedInterval(start=start, end=end, label=_month_range_label(year, from_month, end_year, to_month))


def _month_range_label(year: int, from_month: int, end_year: int, to_month: int) -> str:
    if (year, from_month) == (end_year, to_month):
        return thai_month_year(year, from_month)
    if year == end_year:
        return f"{THAI_MONTHS[from_month]} – {thai_month_year(end_year, to_month)}"
    return f"{thai_month_year(year, from_month)} – {thai_month_year(end_year, to_month)}"


def selection_for_reference(range_: PersonRange | str, on: str) -> PeriodSelection:
    """Turn a person-tab reference (`YYYY-MM-DD` / `YYYY-MM` / `YYYY`) into a selection."""
    try:
        kind = PersonRange(range_)
    except ValueError:
        raise InvalidPeriod(f"Unknown range {range_!r}") from None

    on = (on or "").strip()
    formats = {
        PersonRange.DAY: "%Y-%m-%d",
        PersonRange.MONTH: "%Y-%m",
        PersonRange.YEAR: "%Y",
    }
    try:
        parsed = datetime.strptime(on, formats[kind])
    except ValueError:
        raise InvalidPeriod(f"Reference {on!r} does not match range {kind.value}") from None

    if kind is PersonRange.DAY:
        return DaySelection(date=parsed.date())
    if kind is PersonRange.MONTH:
        return MonthRangeSelection(year=parsed.year, from_month=parsed.month - 1, to_month=parsed.month - 1)
    return YearSelection(year=parsed.year)
