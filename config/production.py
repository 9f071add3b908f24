import os

from config import _split

# The summary API URL must be provided by the deployment environment.
API_CONFIG = {
    "base_url": os.getenv("SUMMARY_API_URL", ""),
    "timeout": float(os.getenv("HTTP_TIMEOUT", "20")),
}

EMPLOYEES = _split(os.getenv("EMPLOYEES", ""))
DEPARTMENTS = _split(os.getenv("DEPARTMENTS", "IT,HR,Finance,Marketing,Operations"))

EXPORT_BASENAME = os.getenv("EXPORT_BASENAME", "attendance_report")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
