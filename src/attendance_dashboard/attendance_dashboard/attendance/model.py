from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import Optional

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceRecord:
    """One employee's status on one date, as delivered by the summary source.

    `employee_id` is None for heads expanded from summary-only counts.
    """

    date: date
    employee_id: Optional[str]
    status: AttendanceStatus
    check_in: Optional[time] = None
    check_out: Optional[time] = None
    department: Optional[str] = None
    reason: Optional[str] = None


@dataclass(frozen=True)
class DaySummary:
    """Per-day head counts; counts are never negative."""

    date: date
    present: int = 0
    leave: int = 0
    not_reported: int = 0
    team: Optional[str] = None

    def __post_init__(self):
        for name in ("present", "leave", "not_reported"):
            if getattr(self, name) < 0:
                raise ValidationError(f"{name} must be >= 0")

    @property
    def total(self) -> int:
        return self.present + self.leave + self.not_reported

    def to_dict(self) -> dict:
        return {
            "date": self.date.strftime("%Y-%m-%d"),
            "team": self.team,
            "present": self.present,
            "leave": self.leave,
            "notReported": self.not_reported,
            "total": self.total,
        }


@dataclass(frozen=True)
class Totals:
    present: int = 0
    leave: int = 0
    not_reported: int = 0

    @property
    def total(self) -> int:
        return self.present + self.leave + self.not_reported

    def count(self, status: AttendanceStatus) -> int:
        return {
            AttendanceStatus.PRESENT: self.present,
            AttendanceStatus.LEAVE: self.leave,
            AttendanceStatus.NOT_REPORTED: self.not_reported,
        }[AttendanceStatus(status)]

    def to_dict(self) -> dict:
        return {
            "present": self.present,
            "leave": self.leave,
            "notReported": self.not_reported,
            "total": self.total,
        }


@dataclass(frozen=True)
class StatusGroups:
    """Employee names per status, first-seen order, not de-duplicated."""

    present: list[Optional[str]] = field(default_factory=list)
    leave: list[Optional[str]] = field(default_factory=list)
    not_reported: list[Optional[str]] = field(default_factory=list)

    def named(self, status: AttendanceStatus) -> list[str]:
        names = {
            AttendanceStatus.PRESENT: self.present,
            AttendanceStatus.LEAVE: self.leave,
            AttendanceStatus.NOT_REPORTED: self.not_reported,
        }[AttendanceStatus(status)]
        return [n for n in names if n is not None]

    def to_dict(self) -> dict:
        return {
            "present": self.named(AttendanceStatus.PRESENT),
            "leave": self.named(AttendanceStatus.LEAVE),
            "notReported": self.named(AttendanceStatus.NOT_REPORTED),
        }


@dataclass(frozen=True)
class MonthlyPercentage:
    month: str
    present: int
    total: int
    percentage: int

    def to_dict(self) -> dict:
        return {"month": self.month, "present": self.present, "total": self.total, "percentage": self.percentage}


@dataclass(frozen=True)
class AggregateResult:
    totals: Totals
    by_status_groups: StatusGroups
    per_day_summaries: list[DaySummary]
    per_employee_monthly: list[MonthlyPercentage]


@dataclass(frozen=True)
class PersonStats:
    employee: str
    totals: Totals
    records: list[AttendanceRecord]
    trend: list[MonthlyPercentage]
