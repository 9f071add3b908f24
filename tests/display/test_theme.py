from __future__ import annotations

from datetime import datetime

import pytest

from src.attendance_dashboard.attendance_dashboard.core.enums import DisplayMode
from src.attendance_dashboard.attendance_dashboard.core.exceptions import ValidationError
from src.attendance_dashboard.attendance_dashboard.display.theme import ThemeConfig, next_mode, resolve_display_mode


def at(hh, mm):
    return datetime(2025, 1, 1, hh, mm)


def test_explicit_modes_ignore_clock():
    assert resolve_display_mode(ThemeConfig(mode="dark"), at(12, 0)) is DisplayMode.DARK
    assert resolve_display_mode(ThemeConfig(mode="light"), at(23, 0)) is DisplayMode.LIGHT


@pytest.mark.parametrize(
    "now,expected",
    [
        (at(20, 0), DisplayMode.DARK),
        (at(18, 0), DisplayMode.DARK),
        (at(5, 59), DisplayMode.DARK),
        (at(6, 0), DisplayMode.LIGHT),
        (at(12, 0), DisplayMode.LIGHT),
    ],
)
def test_auto_mode_with_overnight_dark_window(now, expected):
    assert resolve_display_mode(ThemeConfig(mode="auto"), now) is expected


def test_auto_mode_with_overnight_light_window():
    config = ThemeConfig(mode="auto", dark_start="01:00", light_start="05:00")

    assert resolve_display_mode(config, at(2, 0)) is DisplayMode.DARK
    assert resolve_display_mode(config, at(23, 0)) is DisplayMode.LIGHT


def test_auto_without_schedule_follows_system_preference():
    config = ThemeConfig(mode="auto", auto_mode=False)

    assert resolve_display_mode(config, at(12, 0), prefers_dark=True) is DisplayMode.DARK
    assert resolve_display_mode(config, at(23, 0)) is DisplayMode.LIGHT


def test_toggle_cycle():
    assert next_mode(DisplayMode.AUTO) is DisplayMode.LIGHT
    assert next_mode(DisplayMode.LIGHT) is DisplayMode.DARK
    assert next_mode("dark") is DisplayMode.AUTO


@pytest.mark.parametrize("kwargs", [{"dark_start": "25:00"}, {"light_start": "6am"}, {"custom_theme": "neon"}])
def test_invalid_config(kwargs):
    with pytest.raises(ValidationError):
        ThemeConfig(**kwargs)
