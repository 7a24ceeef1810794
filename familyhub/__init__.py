"""FamilyHub calendar layout engine.

Arranges a household calendar day's events into side-by-side columns and
percentage rectangles for a fixed time grid.

Usage:
    from familyhub import layout_day

    result = layout_day(events, date(2025, 6, 16))
    for event in result.events:
        print(event["title"], event["layout"])
"""

from .engines import (
    DayLayout,
    DayViewEngine,
    InvalidInputShapeError,
    LayoutWarning,
)
from .helpers.config_helpers import LayoutConfig, LayoutConfigError, build_layout_config

layout_day = DayViewEngine.layout_day
layout_week = DayViewEngine.layout_week

__all__ = [
    "DayLayout",
    "DayViewEngine",
    "InvalidInputShapeError",
    "LayoutConfig",
    "LayoutConfigError",
    "LayoutWarning",
    "build_layout_config",
    "layout_day",
    "layout_week",
]
