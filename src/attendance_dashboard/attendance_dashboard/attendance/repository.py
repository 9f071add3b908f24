from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import PersonRange
from .model import AttendanceRecord, DaySummary


class SummaryRepository(Protocol):
    """Read-only source of attendance data.

    Implementations return empty results (never raise) when the source is unavailable.
    """

    def get_day_summary(self, work_date: date) -> Optional[DaySummary]:
        raise NotImplementedError

    def get_summary_range(self, *, start_date: date, end_date: date) -> Sequence[DaySummary]:
        raise NotImplementedError

    def get_person_records(self, *, name: str, range_: PersonRange, on: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
