from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_ROOT = "attendance_dashboard"
_HANDLER_NAME = "attendance_dashboard.stream"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach one stream handler to the package logger (safe to call twice)."""
    logger = logging.getLogger(_ROOT)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(_HANDLER_NAME)
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    # Module names live under the `src.` namespace; group them under one root.
    short = name.rsplit("attendance_dashboard.", 1)[-1]
    return logging.getLogger(f"{_ROOT}.{short}")
