from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .attendance.repository import SummaryRepository
from .container import build_container
from .core.constants import DEFAULT_EXPORT_BASENAME
from .core.logging import configure_logging, get_logger

logger = get_logger(__name__)


def create_app(*, summary_repo: Optional[SummaryRepository] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    api_config = getattr(settings, "API_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["EXPORT_BASENAME"] = getattr(settings, "EXPORT_BASENAME", DEFAULT_EXPORT_BASENAME)

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    if app.config["DEBUG"]:
        logger.info("settings=%s api=%s", settings_module, api_config.get("base_url") or "<unset>")

    container = build_container(
        api_config=api_config,
        employees=getattr(settings, "EMPLOYEES", ()),
        departments=getattr(settings, "DEPARTMENTS", ()),
        summary_repo=summary_repo,
    )

    register_attendance(app, container)

    return app
