"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Buddhist era = Gregorian + 543 (display only).
BUDDHIST_ERA_OFFSET = 543

MIN_YEAR = 1900
MAX_YEAR = 2399

THAI_MONTHS = (
    "มกราคม",
    "กุมภาพันธ์",
    "มีนาคม",
    "เมษายน",
    "พฤษภาคม",
    "มิถุนายน",
    "กรกฎาคม",
    "สิงหาคม",
    "กันยายน",
    "ตุลาคม",
    "พฤศจิกายน",
    "ธันวาคม",
)

THAI_WEEKDAYS = ("จันทร์", "อังคาร", "พุธ", "พฤหัสบดี", "ศุกร์", "เสาร์", "อาทิตย์")

DEFAULT_TREND_MONTHS = 6

MISSING_FIELD = "-"

# Export columns: (header, width in characters). Order is the file order.
EXPORT_COLUMNS = (
    ("date", "วันที่", 15),
    ("employee", "ชื่อพนักงาน", 20),
    ("status_label", "สถานะ", 15),
    ("department", "แผนก", 15),
    ("check_in", "เวลาเข้า", 15),
    ("check_out", "เวลาออก", 15),
    ("reason", "หมายเหตุ", 25),
)

WORKSHEET_TITLE = "รายงานการเข้างาน"
DEFAULT_EXPORT_BASENAME = "attendance_report"

# A4 portrait, in millimetres.
PAGE_WIDTH_MM = 210.0
PAGE_HEIGHT_MM = 297.0
PAGE_MARGIN_MM = 10.0
PAGE_DPI = 150
