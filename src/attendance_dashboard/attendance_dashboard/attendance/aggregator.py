from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import month_key
from ..core.constants import DEFAULT_TREND_MONTHS
from ..core.enums import AttendanceStatus
from ..core.labels import status_label
from ..periods.model import ResolvedInterval
from .model import (
    AggregateResult,
    AttendanceRecord,
    DaySummary,
    MonthlyPercentage,
    PersonStats,
    StatusGroups,
    Totals,
)


def percentage(part: int, total: int) -> int:
    """Whole percent, rounded half-up; 0 when there is nothing to divide by."""
    if total <= 0:
        return 0
    value = Decimal(part) * 100 / Decimal(total)
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def percentages(totals: Totals) -> dict:
    return {
        "present": percentage(totals.present, totals.total),
        "leave": percentage(totals.leave, totals.total),
        "notReported": percentage(totals.not_reported, totals.total),
    }


def within(records: Iterable[AttendanceRecord], interval: ResolvedInterval) -> list[AttendanceRecord]:
    return [r for r in records if interval.contains(r.date)]


def count_totals(records: Iterable[AttendanceRecord]) -> Totals:
    counts = {s: 0 for s in AttendanceStatus}
    for r in records:
        counts[AttendanceStatus(r.status)] += 1
    return Totals(
        present=counts[AttendanceStatus.PRESENT],
        leave=counts[AttendanceStatus.LEAVE],
        not_reported=counts[AttendanceStatus.NOT_REPORTED],
    )


def sum_summaries(summaries: Iterable[DaySummary]) -> Totals:
    present = leave = not_reported = 0
    for s in summaries:
        present += s.present
        leave += s.leave
        not_reported += s.not_reported
    return Totals(present=present, leave=leave, not_reported=not_reported)


def group_by_status(records: Iterable[AttendanceRecord]) -> StatusGroups:
    groups = StatusGroups()
    target = {
        AttendanceStatus.PRESENT: groups.present,
        AttendanceStatus.LEAVE: groups.leave,
        AttendanceStatus.NOT_REPORTED: groups.not_reported,
    }
    for r in records:
        target[AttendanceStatus(r.status)].append(r.employee_id)
    return groups


def per_day_summaries(records: Iterable[AttendanceRecord], *, newest_first: bool = True) -> list[DaySummary]:
    by_date: dict = {}
    for r in records:
        by_date.setdefault(r.date, []).append(r)

    out = []
    for day, items in by_date.items():
        t = count_totals(items)
        out.append(DaySummary(date=day, present=t.present, leave=t.leave, not_reported=t.not_reported))
    out.sort(key=lambda s: s.date, reverse=newest_first)
    return out


def sort_summaries(summaries: Iterable[DaySummary], *, newest_first: bool = True) -> list[DaySummary]:
    return sorted(summaries, key=lambda s: s.date, reverse=newest_first)


def per_employee_monthly(
    records: Iterable[AttendanceRecord],
    *,
    employee_id: Optional[str] = None,
    months: int = DEFAULT_TREND_MONTHS,
) -> list[MonthlyPercentage]:
    """Present-rate per calendar month, the last `months` months in ascending order."""
    buckets: dict[str, list[int]] = {}
    for r in records:
        if employee_id is not None and r.employee_id != employee_id:
            continue
        bucket = buckets.setdefault(month_key(r.date), [0, 0])
        bucket[1] += 1
        if r.status == AttendanceStatus.PRESENT:
            bucket[0] += 1

    keys = sorted(buckets)[-months:] if months > 0 else []
    return [
        MonthlyPercentage(month=k, present=buckets[k][0], total=buckets[k][1], percentage=percentage(*buckets[k]))
        for k in keys
    ]


def aggregate(
    records: Sequence[AttendanceRecord],
    interval: ResolvedInterval,
    *,
    employee_id: Optional[str] = None,
    newest_first: bool = True,
) -> AggregateResult:
    """Recompute every dashboard figure from scratch for the given interval."""
    included = within(records, interval)
    return AggregateResult(
        totals=count_totals(included),
        by_status_groups=group_by_status(included),
        per_day_summaries=per_day_summaries(included, newest_first=newest_first),
        per_employee_monthly=per_employee_monthly(included, employee_id=employee_id),
    )


def aggregate_summaries(
    summaries: Sequence[DaySummary],
    interval: ResolvedInterval,
    *,
    newest_first: bool = True,
) -> AggregateResult:
    """Same result shape for pre-aggregated day counts (no names, no trend)."""
    included = [s for s in summaries if interval.contains(s.date)]
    return AggregateResult(
        totals=sum_summaries(included),
        by_status_groups=group_by_status(expand_summaries(included)),
        per_day_summaries=sort_summaries(included, newest_first=newest_first),
        per_employee_monthly=[],
    )


def expand_summaries(summaries: Iterable[DaySummary]) -> list[AttendanceRecord]:
    """One anonymous record per counted head, so summary-only views share the record pipeline."""
    out: list[AttendanceRecord] = []
    for s in summaries:
        for status, count in (
            (AttendanceStatus.PRESENT, s.present),
            (AttendanceStatus.LEAVE, s.leave),
            (AttendanceStatus.NOT_REPORTED, s.not_reported),
        ):
            out.extend(
                AttendanceRecord(date=s.date, employee_id=None, status=status, department=s.team)
                for _ in range(count)
            )
    return out


def person_stats(records: Iterable[AttendanceRecord], employee_id: str) -> PersonStats:
    own = [r for r in records if r.employee_id == employee_id]
    return PersonStats(
        employee=employee_id,
        totals=count_totals(own),
        records=sorted(own, key=lambda r: r.date, reverse=True),
        trend=per_employee_monthly(own),
    )


def summary_status_text(summary: DaySummary) -> str:
    parts = []
    for status, count in (
        (AttendanceStatus.PRESENT, summary.present),
        (AttendanceStatus.LEAVE, summary.leave),
        (AttendanceStatus.NOT_REPORTED, summary.not_reported),
    ):
        if count > 0:
            parts.append(f"{count} {status_label(status)}")
    return " ".join(parts)
