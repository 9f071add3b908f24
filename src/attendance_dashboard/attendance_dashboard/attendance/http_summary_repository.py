from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Optional, Sequence

from ..api.connection import ApiConnection
from ..api.http_base import fetch_or_default
from ..common.datetime_utils import parse_iso_date, to_iso
from ..core.enums import AttendanceStatus, PersonRange
from ..core.exceptions import ValidationError
from ..core.logging import get_logger
from .model import AttendanceRecord, DaySummary
from .repository import SummaryRepository

logger = get_logger(__name__)


class HttpSummaryRepository(SummaryRepository):
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def get_day_summary(self, work_date: date) -> Optional[DaySummary]:
        data = fetch_or_default(self._conn, {"route": "summary", "date": to_iso(work_date)}, None)
        if not isinstance(data, dict):
            return None
        return _to_summary(data)

    def get_summary_range(self, *, start_date: date, end_date: date) -> Sequence[DaySummary]:
        data = fetch_or_default(
            self._conn,
            {"route": "summary_range", "from": to_iso(start_date), "to": to_iso(end_date)},
            [],
        )
        if not isinstance(data, list):
            return []
        return [s for s in (_to_summary(r) for r in data if isinstance(r, dict)) if s is not None]

    def get_person_records(self, *, name: str, range_: PersonRange, on: str) -> Sequence[AttendanceRecord]:
        data = fetch_or_default(
            self._conn,
            {"route": "person", "name": name, "range": PersonRange(range_).value, "on": on},
            None,
        )
        items = data.get("items") if isinstance(data, dict) else None
        if not isinstance(items, list):
            return []
        return [r for r in (_to_record(i) for i in items if isinstance(i, dict)) if r is not None]


def _to_summary(r: dict) -> Optional[DaySummary]:
    try:
        return DaySummary(
            date=parse_iso_date(str(r["date"])[:10]),
            present=int(r.get("present") or 0),
            leave=int(r.get("leave") or 0),
            not_reported=int(r.get("notReported") or 0),
            team=r.get("team") or None,
        )
    except (KeyError, TypeError, ValueError, ValidationError) as exc:
        logger.warning("skipping malformed day summary %r: %s", r, exc)
        return None


def _to_record(r: dict) -> Optional[AttendanceRecord]:
    try:
        return AttendanceRecord(
            date=parse_iso_date(str(r["date"])[:10]),
            employee_id=(r.get("name") or r.get("employee") or None),
            status=AttendanceStatus(r["status"]),
            check_in=_parse_clock(r.get("checkIn")),
            check_out=_parse_clock(r.get("checkOut")),
            department=r.get("department") or r.get("team") or None,
            reason=r.get("reason") or None,
        )
    except (KeyError, TypeError, ValueError) as exc:
        logger.warning("skipping malformed person record %r: %s", r, exc)
        return None


def _parse_clock(value: Any) -> Optional[time]:
    if not value:
        return None
    text = str(value).strip()
    for fmt in ("%H:%M:%S", "%H:%M"):
        try:
            return datetime.strptime(text, fmt).time()
        except ValueError:
            continue
    raise ValueError(f"invalid clock time {value!r}")
