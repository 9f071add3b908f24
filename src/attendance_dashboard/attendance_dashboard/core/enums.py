from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Trạng thái báo cáo của nhân viên trong một ngày (mã từ API tổng hợp)."""

    PRESENT = "present"
    LEAVE = "leave"
    NOT_REPORTED = "not_reported"


class PeriodKind(str, Enum):
    """Loại kỳ báo cáo người dùng chọn."""

    DAY = "day"
    MONTH_RANGE = "monthRange"
    YEAR = "year"


class PersonRange(str, Enum):
    """Phạm vi tra cứu của tab cá nhân (`range=` trong API)."""

    DAY = "day"
    MONTH = "month"
    YEAR = "year"


class DisplayMode(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"
