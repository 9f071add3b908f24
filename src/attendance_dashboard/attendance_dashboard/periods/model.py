from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from ..core.enums import PeriodKind


@dataclass(frozen=True)
class DaySelection:
    date: date

    kind = PeriodKind.DAY


@dataclass(frozen=True)
class MonthRangeSelection:
    """Zero-based month range; `to_year` defaults to `year`."""

    year: int
    from_month: int
    to_month: int
    to_year: Optional[int] = None

    kind = PeriodKind.MONTH_RANGE

    @property
    def end_year(self) -> int:
        return self.year if self.to_year is None else self.to_year


@dataclass(frozen=True)
class YearSelection:
    year: int

    kind = PeriodKind.YEAR


PeriodSelection = Union[DaySelection, MonthRangeSelection, YearSelection]


@dataclass(frozen=True)
class ResolvedInterval:
    """Closed Gregorian date interval; `label` is display-only text."""

    start: date
    end: date
    label: str

    def contains(self, value: date) -> bool:
        return self.start <= value <= self.end

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    def to_dict(self) -> dict:
        return {
            "from": self.start.strftime("%Y-%m-%d"),
            "to": self.end.strftime("%Y-%m-%d"),
            "label": self.label,
        }
