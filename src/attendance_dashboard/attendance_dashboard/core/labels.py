from __future__ import annotations

from dataclasses import dataclass

from .enums import AttendanceStatus


@dataclass(frozen=True)
class StatusStyle:
    label: str
    color_token: str


# Single lookup table consumed by exports and presentation.
STATUS_STYLES: dict[AttendanceStatus, StatusStyle] = {
    AttendanceStatus.PRESENT: StatusStyle(label="เข้างาน", color_token="green"),
    AttendanceStatus.LEAVE: StatusStyle(label="ลา", color_token="red"),
    AttendanceStatus.NOT_REPORTED: StatusStyle(label="ไม่ระบุงาน", color_token="yellow"),
}


def status_label(status: AttendanceStatus) -> str:
    return STATUS_STYLES[AttendanceStatus(status)].label


def status_options() -> list[dict]:
    """Options for filter widgets, in enum order."""
    return [
        {"value": s.value, "label": style.label, "color": style.color_token}
        for s, style in STATUS_STYLES.items()
    ]
