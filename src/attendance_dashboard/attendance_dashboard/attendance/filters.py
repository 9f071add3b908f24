from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import AttendanceRecord


@dataclass(frozen=True)
class FilterState:
    """Secondary filters chosen in the dashboard; empty fields mean "no restriction"."""

    date_from: Optional[date] = None
    date_to: Optional[date] = None
    employees: frozenset[str] = field(default_factory=frozenset)
    statuses: frozenset[AttendanceStatus] = field(default_factory=frozenset)
    departments: frozenset[str] = field(default_factory=frozenset)
    search_term: str = ""

    def __post_init__(self):
        if self.date_from and self.date_to and self.date_from > self.date_to:
            raise ValidationError("Ngày bắt đầu lọc phải trước ngày kết thúc")
        object.__setattr__(self, "employees", frozenset(self.employees))
        object.__setattr__(self, "statuses", frozenset(AttendanceStatus(s) for s in self.statuses))
        object.__setattr__(self, "departments", frozenset(self.departments))

    @property
    def active_count(self) -> int:
        """Number of active filter groups (badge on the filter button)."""
        return sum(
            [
                bool(self.date_from or self.date_to),
                bool(self.employees),
                bool(self.statuses),
                bool(self.departments),
                bool(self.search_term.strip()),
            ]
        )


def matches(record: AttendanceRecord, state: FilterState) -> bool:
    if state.date_from and record.date < state.date_from:
        return False
    if state.date_to and record.date > state.date_to:
        return False
    if state.employees and record.employee_id not in state.employees:
        return False
    if state.statuses and record.status not in state.statuses:
        return False
    if state.departments and record.department not in state.departments:
        return False

    term = state.search_term.strip().casefold()
    if term and (record.employee_id is None or term not in record.employee_id.casefold()):
        return False
    return True


def filter_records(records: Iterable[AttendanceRecord], state: FilterState | None = None) -> list[AttendanceRecord]:
    """Stable filter: output keeps the input order."""
    records = list(records)
    if state is None or state.active_count == 0:
        return records
    return [r for r in records if matches(r, state)]
