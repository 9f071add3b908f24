from __future__ import annotations

import io
from datetime import date

from openpyxl import load_workbook

from src.attendance_dashboard.attendance_dashboard.attendance.model import AttendanceRecord
from src.attendance_dashboard.attendance_dashboard.core.enums import AttendanceStatus
from src.attendance_dashboard.attendance_dashboard.exports.model import to_export_rows
from src.attendance_dashboard.attendance_dashboard.exports.workbook_exporter import to_workbook


def read_sheet(data: bytes):
    wb = load_workbook(io.BytesIO(data))
    assert len(wb.sheetnames) == 1
    return wb[wb.sheetnames[0]]


def rows():
    return to_export_rows(
        [
            AttendanceRecord(date=date(2025, 1, 2), employee_id="เจ", status=AttendanceStatus.PRESENT, department="IT"),
            AttendanceRecord(date=date(2025, 1, 2), employee_id="ปอง", status=AttendanceStatus.LEAVE, reason="ลากิจ"),
        ]
    )


def test_workbook_has_header_and_rows_in_order():
    ws = read_sheet(to_workbook(rows()))

    values = [list(r) for r in ws.iter_rows(values_only=True)]
    assert ws.title == "รายงานการเข้างาน"
    assert values[0] == ["วันที่", "ชื่อพนักงาน", "สถานะ", "แผนก", "เวลาเข้า", "เวลาออก", "หมายเหตุ"]
    assert values[1] == ["2025-01-02", "เจ", "เข้างาน", "IT", "-", "-", "-"]
    assert values[2] == ["2025-01-02", "ปอง", "ลา", "-", "-", "-", "ลากิจ"]


def test_workbook_column_widths():
    ws = read_sheet(to_workbook(rows()))

    widths = [ws.column_dimensions[c].width for c in "ABCDEFG"]
    assert widths == [15, 20, 15, 15, 15, 15, 25]


def test_workbook_cell_data_is_deterministic():
    first = read_sheet(to_workbook(rows()))
    second = read_sheet(to_workbook(rows()))

    assert list(first.iter_rows(values_only=True)) == list(second.iter_rows(values_only=True))


def test_empty_workbook_keeps_header():
    ws = read_sheet(to_workbook([]))

    assert ws.max_row == 1
