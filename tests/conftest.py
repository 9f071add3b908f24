from __future__ import annotations

from datetime import date, datetime

import pytest

from src.attendance_dashboard.attendance_dashboard.attendance.model import AttendanceRecord
from src.attendance_dashboard.attendance_dashboard.core.enums import AttendanceStatus


@pytest.fixture
def fixed_now():
    return datetime(2025, 3, 10, 9, 15, 0)


@pytest.fixture
def quarter_records():
    """Three records around the Jan-Feb 2025 window."""
    return [
        AttendanceRecord(date=date(2025, 1, 15), employee_id="เจ", status=AttendanceStatus.PRESENT, department="IT"),
        AttendanceRecord(date=date(2025, 2, 28), employee_id="ปอง", status=AttendanceStatus.LEAVE, department="HR"),
        AttendanceRecord(date=date(2025, 3, 1), employee_id="เจ", status=AttendanceStatus.PRESENT, department="IT"),
    ]
