API_CONFIG = {
    "base_url": "http://summary.test/exec",
    "timeout": 1.0,
}

EMPLOYEES = ["เจ", "กอล์ฟ", "ปอง"]
DEPARTMENTS = ["IT", "HR"]

EXPORT_BASENAME = "attendance_report"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
