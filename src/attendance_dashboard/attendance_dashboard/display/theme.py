from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import DisplayMode
from ..core.exceptions import ValidationError

CUSTOM_THEMES = ("default", "corporate", "ocean", "forest", "sunset")


@dataclass(frozen=True)
class ThemeConfig:
    """Explicit display configuration handed to the rendering layer."""

    mode: DisplayMode = DisplayMode.LIGHT
    custom_theme: str = "default"
    auto_mode: bool = True
    dark_start: str = "18:00"
    light_start: str = "06:00"

    def __post_init__(self):
        object.__setattr__(self, "mode", DisplayMode(self.mode))
        if self.custom_theme not in CUSTOM_THEMES:
            raise ValidationError(f"Unknown theme {self.custom_theme!r}")
        _minutes(self.dark_start)
        _minutes(self.light_start)


def _minutes(hhmm: str) -> int:
    try:
        hours, minutes = (int(p) for p in hhmm.split(":"))
    except (AttributeError, ValueError):
        raise ValidationError(f"Invalid time {hhmm!r}, expected HH:MM") from None
    if not (0 <= hours < 24 and 0 <= minutes < 60):
        raise ValidationError(f"Invalid time {hhmm!r}, expected HH:MM")
    return hours * 60 + minutes


def resolve_display_mode(config: ThemeConfig, now: datetime, *, prefers_dark: bool = False) -> DisplayMode:
    if config.mode is not DisplayMode.AUTO:
        return config.mode

    if not config.auto_mode:
        return DisplayMode.DARK if prefers_dark else DisplayMode.LIGHT

    dark = _minutes(config.dark_start)
    light = _minutes(config.light_start)
    current = now.hour * 60 + now.minute

    if dark > light:
        # Dark window wraps midnight, e.g. 18:00 -> 06:00.
        is_dark = current >= dark or current < light
    else:
        is_dark = dark <= current < light
    return DisplayMode.DARK if is_dark else DisplayMode.LIGHT


def next_mode(mode: DisplayMode) -> DisplayMode:
    """Toggle order: auto -> light -> dark -> auto."""
    return {
        DisplayMode.AUTO: DisplayMode.LIGHT,
        DisplayMode.LIGHT: DisplayMode.DARK,
        DisplayMode.DARK: DisplayMode.AUTO,
    }[DisplayMode(mode)]
