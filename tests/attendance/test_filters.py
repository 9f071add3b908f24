from __future__ import annotations

from datetime import date

import pytest

from src.attendance_dashboard.attendance_dashboard.attendance.filters import FilterState, filter_records
from src.attendance_dashboard.attendance_dashboard.attendance.model import AttendanceRecord
from src.attendance_dashboard.attendance_dashboard.core.enums import AttendanceStatus
from src.attendance_dashboard.attendance_dashboard.core.exceptions import ValidationError

P = AttendanceStatus.PRESENT
L = AttendanceStatus.LEAVE
N = AttendanceStatus.NOT_REPORTED


@pytest.fixture
def records():
    return [
        AttendanceRecord(date=date(2025, 1, 2), employee_id="Alice", status=P, department="IT"),
        AttendanceRecord(date=date(2025, 1, 3), employee_id="Bob", status=L, department="HR"),
        AttendanceRecord(date=date(2025, 1, 4), employee_id="alicia", status=N, department="IT"),
        AttendanceRecord(date=date(2025, 1, 5), employee_id=None, status=P, department="IT"),
        AttendanceRecord(date=date(2025, 1, 6), employee_id="Bob", status=P, department="HR"),
    ]


def test_no_filter_is_identity(records):
    assert filter_records(records, FilterState()) == records
    assert filter_records(records) == records


def test_status_filter(records):
    out = filter_records(records, FilterState(statuses={P}))

    assert [r.date.day for r in out] == [2, 5, 6]


def test_status_filter_accepts_codes(records):
    out = filter_records(records, FilterState(statuses={"leave"}))

    assert [r.employee_id for r in out] == ["Bob"]


def test_unknown_status_code_is_rejected():
    with pytest.raises(ValueError):
        FilterState(statuses={"late"})


def test_employee_and_department_filters_intersect(records):
    out = filter_records(records, FilterState(employees={"Bob", "Alice"}, departments={"HR"}))

    assert [r.date.day for r in out] == [3, 6]


def test_search_is_case_insensitive_substring(records):
    out = filter_records(records, FilterState(search_term="  ALI "))

    assert [r.employee_id for r in out] == ["Alice", "alicia"]


def test_blank_search_means_no_filter(records):
    assert filter_records(records, FilterState(search_term="   ")) == records


def test_date_range_is_inclusive(records):
    out = filter_records(records, FilterState(date_from=date(2025, 1, 3), date_to=date(2025, 1, 5)))

    assert [r.date.day for r in out] == [3, 4, 5]


def test_open_ended_date_range(records):
    out = filter_records(records, FilterState(date_from=date(2025, 1, 5)))

    assert [r.date.day for r in out] == [5, 6]


def test_inverted_date_range_is_rejected():
    with pytest.raises(ValidationError):
        FilterState(date_from=date(2025, 1, 5), date_to=date(2025, 1, 1))


def test_filter_is_idempotent_and_order_preserving(records):
    state = FilterState(statuses={P, N}, departments={"IT"}, search_term="a")

    once = filter_records(records, state)
    twice = filter_records(once, state)

    assert once == twice
    positions = [records.index(r) for r in once]
    assert positions == sorted(positions)


def test_active_count():
    assert FilterState().active_count == 0
    state = FilterState(date_to=date(2025, 1, 1), employees={"a"}, search_term="x")
    assert state.active_count == 3
