from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..core.constants import THAI_MONTHS
from ..core.enums import PeriodKind, PersonRange
from ..core.labels import status_options
from ..core.logging import get_logger
from ..exports.model import ExportRow, to_export_rows
from ..periods.model import DaySelection, MonthRangeSelection, ResolvedInterval
from ..periods.resolver import resolve, selection_for_reference
from .aggregator import (
    aggregate,
    aggregate_summaries,
    expand_summaries,
    person_stats,
    percentages,
    summary_status_text,
    within,
)
from .filters import FilterState, filter_records
from .model import AggregateResult, AttendanceRecord, DaySummary, PersonStats
from .repository import SummaryRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class ReportView:
    """What one dashboard tab currently shows; exports are built from `records`."""

    kind: str
    interval: ResolvedInterval
    records: list[AttendanceRecord]
    result: AggregateResult
    summary: Optional[DaySummary] = None
    stats: Optional[PersonStats] = None

    def to_dict(self) -> dict:
        data = {
            "view": self.kind,
            "interval": self.interval.to_dict(),
            "totals": self.result.totals.to_dict(),
            "percentages": percentages(self.result.totals),
        }
        if self.kind == PeriodKind.DAY.value:
            data["groups"] = self.result.by_status_groups.to_dict()
            data["status_text"] = summary_status_text(self.summary) if self.summary else ""
        elif self.kind == PeriodKind.MONTH_RANGE.value:
            data["days"] = [s.to_dict() for s in self.result.per_day_summaries]
        if self.stats is not None:
            data["stats"] = {"employee": self.stats.employee, **self.stats.totals.to_dict()}
            data["records"] = [
                {
                    "date": r.date.strftime("%Y-%m-%d"),
                    "status": r.status.value,
                    "checkIn": r.check_in.strftime("%H:%M") if r.check_in else None,
                    "checkOut": r.check_out.strftime("%H:%M") if r.check_out else None,
                    "reason": r.reason,
                }
                for r in self.stats.records
            ]
            data["trend"] = [m.to_dict() for m in self.stats.trend]
        return data


class DashboardService:
    def __init__(
        self,
        summaries: SummaryRepository,
        *,
        employees: Sequence[str] = (),
        departments: Sequence[str] = (),
    ):
        self._summaries = summaries
        self._employees = list(employees)
        self._departments = list(departments)

    def day_view(self, work_date: date, filters: Optional[FilterState] = None) -> ReportView:
        interval = resolve(DaySelection(date=work_date))
        summary = self._summaries.get_day_summary(work_date)
        records = filter_records(expand_summaries([summary] if summary else []), filters)
        return ReportView(
            kind=PeriodKind.DAY.value,
            interval=interval,
            records=within(records, interval),
            result=aggregate(records, interval),
            summary=summary,
        )

    def month_view(
        self,
        *,
        year: int,
        from_month: int,
        to_month: int,
        to_year: Optional[int] = None,
        filters: Optional[FilterState] = None,
    ) -> ReportView:
        interval = resolve(MonthRangeSelection(year=year, from_month=from_month, to_month=to_month, to_year=to_year))
        summaries = list(self._summaries.get_summary_range(start_date=interval.start, end_date=interval.end))

        records = filter_records(expand_summaries(summaries), filters)
        if filters is None or filters.active_count == 0:
            # Keep zero-count days from the source in the table.
            result = aggregate_summaries(summaries, interval)
        else:
            result = aggregate(records, interval)

        logger.debug("month view %s: %s day summaries", interval.label, len(summaries))
        return ReportView(
            kind=PeriodKind.MONTH_RANGE.value,
            interval=interval,
            records=within(records, interval),
            result=result,
        )

    def person_view(
        self,
        *,
        name: str,
        range_: PersonRange | str,
        on: str,
        filters: Optional[FilterState] = None,
    ) -> ReportView:
        interval = resolve(selection_for_reference(range_, on))
        records = self._summaries.get_person_records(name=name, range_=PersonRange(range_), on=on.strip())
        records = within(filter_records(records, filters), interval)
        return ReportView(
            kind="person",
            interval=interval,
            records=records,
            result=aggregate(records, interval, employee_id=name),
            stats=person_stats(records, name),
        )

    def options(self) -> dict:
        return {
            "employees": self._employees,
            "departments": self._departments,
            "statuses": status_options(),
            "months": [{"value": i, "label": label} for i, label in enumerate(THAI_MONTHS)],
        }

    def export_rows(self, report: ReportView) -> list[ExportRow]:
        """Rows for the records the view currently shows, in display order."""
        return to_export_rows(report.records)
