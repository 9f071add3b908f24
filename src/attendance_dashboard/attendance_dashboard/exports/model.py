from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, time
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import export_timestamp
from ..core.constants import EXPORT_COLUMNS, MISSING_FIELD
from ..core.enums import AttendanceStatus
from ..core.labels import status_label

_NEWLINES = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class ExportRow:
    """Export-facing, already localized projection of an AttendanceRecord."""

    date: str
    employee: str
    status_label: str
    department: str
    check_in: str
    check_out: str
    reason: str
    status: Optional[AttendanceStatus] = None

    def values(self) -> list[str]:
        return [getattr(self, key) for key, _, _ in EXPORT_COLUMNS]


def _text(value: Optional[str]) -> str:
    return value if value else MISSING_FIELD


def _clock(value: Optional[time]) -> str:
    return value.strftime("%H:%M") if value else MISSING_FIELD


def to_export_row(record: AttendanceRecord) -> ExportRow:
    return ExportRow(
        date=record.date.strftime("%Y-%m-%d"),
        employee=_text(record.employee_id),
        status_label=status_label(record.status),
        department=_text(record.department),
        check_in=_clock(record.check_in),
        check_out=_clock(record.check_out),
        reason=_NEWLINES.sub(" ", record.reason) if record.reason else MISSING_FIELD,
        status=AttendanceStatus(record.status),
    )


def to_export_rows(records: Iterable[AttendanceRecord]) -> list[ExportRow]:
    return [to_export_row(r) for r in records]


def export_filename(basename: str, ext: str, moment: datetime) -> str:
    return f"{basename}_{export_timestamp(moment)}.{ext.lstrip('.')}"


def summary_report(rows: list[ExportRow]) -> dict:
    """Headline numbers for an export: counts, departments, first/last date."""
    counts = {s: 0 for s in AttendanceStatus}
    for row in rows:
        if row.status is not None:
            counts[row.status] += 1
    departments = sorted({r.department for r in rows if r.department and r.department != MISSING_FIELD})
    return {
        "totalRecords": len(rows),
        "present": counts[AttendanceStatus.PRESENT],
        "leave": counts[AttendanceStatus.LEAVE],
        "notReported": counts[AttendanceStatus.NOT_REPORTED],
        "departments": departments,
        "dateRange": {
            "from": rows[0].date if rows else "",
            "to": rows[-1].date if rows else "",
        },
    }
