import os

from config import _split

API_CONFIG = {
    "base_url": os.getenv("SUMMARY_API_URL", "http://localhost:8080/exec"),
    "timeout": float(os.getenv("HTTP_TIMEOUT", "20")),
}

EMPLOYEES = _split(os.getenv("EMPLOYEES", "เจ,กอล์ฟ,ปอง,เจ้าสัว,ปริม,จ๊าบ,รีน,เช็ค,เบนซ์"))
DEPARTMENTS = _split(os.getenv("DEPARTMENTS", "IT,HR,Finance,Marketing,Operations"))

EXPORT_BASENAME = os.getenv("EXPORT_BASENAME", "attendance_report")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
