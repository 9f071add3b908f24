from __future__ import annotations

import csv
import io
import re
from datetime import date, datetime

import pytest
from PIL import Image

from src.attendance_dashboard.attendance_dashboard.attendance import controller
from src.attendance_dashboard.attendance_dashboard.attendance.model import AttendanceRecord, DaySummary
from src.attendance_dashboard.attendance_dashboard.core.enums import AttendanceStatus
from src.attendance_dashboard.attendance_dashboard.main import create_app


class FakeSummaries:
    def __init__(self):
        self.days = {
            date(2025, 1, 2): DaySummary(date=date(2025, 1, 2), present=2, leave=1, not_reported=0, team="IT"),
            date(2025, 1, 3): DaySummary(date=date(2025, 1, 3), present=1, leave=0, not_reported=1, team="HR"),
        }
        self.person = [
            AttendanceRecord(date=date(2025, 1, 2), employee_id="เจ", status=AttendanceStatus.PRESENT, department="IT"),
            AttendanceRecord(
                date=date(2025, 1, 3),
                employee_id="เจ",
                status=AttendanceStatus.LEAVE,
                department="IT",
                reason="ลาป่วย, มีใบรับรอง",
            ),
        ]

    def get_day_summary(self, work_date):
        return self.days.get(work_date)

    def get_summary_range(self, *, start_date, end_date):
        return [d for d in self.days.values() if start_date <= d.date <= end_date]

    def get_person_records(self, *, name, range_, on):
        return [r for r in self.person if r.employee_id == name]


@pytest.fixture
def client(monkeypatch, fixed_now):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr(controller, "now_local", lambda: fixed_now)
    app = create_app(summary_repo=FakeSummaries())
    return app.test_client()


def test_day_endpoint(client):
    res = client.get("/api/day?date=2025-01-02")

    assert res.status_code == 200
    data = res.get_json()["data"]
    assert data["totals"] == {"present": 2, "leave": 1, "notReported": 0, "total": 3}
    assert data["interval"]["from"] == data["interval"]["to"] == "2025-01-02"


def test_month_endpoint_with_filters(client):
    res = client.get("/api/month?year=2025&from_month=0&to_month=0&department=HR")

    data = res.get_json()["data"]
    assert data["totals"]["total"] == 2
    assert [d["date"] for d in data["days"]] == ["2025-01-03"]


def test_month_endpoint_rejects_reversed_range(client):
    res = client.get("/api/month?year=2025&from_month=11&to_month=0")

    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_bad_status_filter_is_a_client_error(client):
    res = client.get("/api/day?date=2025-01-02&status=late")

    assert res.status_code == 400


def test_person_endpoint_requires_name(client):
    assert client.get("/api/person?range=month&on=2025-01").status_code == 400


def test_person_endpoint(client):
    res = client.get("/api/person", query_string={"name": "เจ", "range": "month", "on": "2025-01"})

    data = res.get_json()["data"]
    assert data["stats"]["present"] == 1
    assert data["trend"][0]["percentage"] == 50


def test_csv_export(client):
    res = client.get("/export/person.csv", query_string={"name": "เจ", "range": "month", "on": "2025-01"})

    assert res.status_code == 200
    assert res.mimetype == "text/csv"
    assert "attachment; filename=attendance_report_2025-03-10T09-15-00.csv" == res.headers["Content-Disposition"]
    assert res.data.startswith(b"\xef\xbb\xbf")
    rows = list(csv.reader(io.StringIO(res.data.decode("utf-8-sig"))))
    assert rows[2] == ["2025-01-03", "เจ", "ลา", "IT", "-", "-", "ลาป่วย, มีใบรับรอง"]


def test_xlsx_export(client):
    res = client.get("/export/month.xlsx?year=2025&from_month=0&to_month=0")

    assert res.status_code == 200
    assert res.data[:2] == b"PK"
    assert re.search(r"attendance_report_2025-03-10T09-15-00\.xlsx", res.headers["Content-Disposition"])


def test_pdf_export_without_surface(client):
    res = client.post("/export/pdf")

    assert res.status_code == 422
    assert res.get_json()["message"] == "ไม่พบข้อมูลที่จะ Export กรุณาลองใหม่อีกครั้ง"


def test_pdf_export(client):
    png = io.BytesIO()
    Image.new("RGB", (400, 900), "white").save(png, format="PNG")
    png.seek(0)

    res = client.post("/export/pdf", data={"surface": (png, "view.png")}, content_type="multipart/form-data")

    assert res.status_code == 200
    assert res.mimetype == "application/pdf"
    assert res.data.startswith(b"%PDF")


def test_options(client):
    data = client.get("/api/options").get_json()["data"]

    assert data["employees"] == ["เจ", "กอล์ฟ", "ปอง"]
    assert data["statuses"][2]["label"] == "ไม่ระบุงาน"


def test_display_mode(client):
    res = client.get("/api/display-mode?mode=auto&at=2025-01-01T20:00:00")

    assert res.get_json()["data"]["mode"] == "dark"
    assert client.get("/api/display-mode?mode=sepia").status_code == 400
