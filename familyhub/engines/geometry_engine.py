"""Geometry Engine - Pure logic for mapping packed events onto the day grid.

This engine provides stateless, pure Python functions for:
- Clipping an event's span to the visible window
- Percentage rectangles (top, height, left, width) for rendering
- Time slot labels drawn down the side of the grid
- CSS-ready percentage strings for the rendering layer

ARCHITECTURE: This is a pure logic engine. All functions are static methods
that operate on passed-in data.

Vertical geometry is relative to the configured window (07:00-22:00 by
default). Every top is shifted up by `top_offset_percent` (half a slot by
default) and clamped at 0, so short events sit centered on hour gridlines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .. import const
from ..utils.dt_utils import format_minute_label
from ..utils.math_utils import percent_of

if TYPE_CHECKING:
    from ..helpers.config_helpers import LayoutConfig
    from ..type_defs import EventLayout
    from .event_engine import ResolvedEvent


class GeometryEngine:
    """Pure logic engine for layout rectangles.

    All methods are static - no instance state.
    """

    @staticmethod
    def clip_to_window(
        resolved: ResolvedEvent, config: LayoutConfig
    ) -> tuple[int, int]:
        """Clip an event's span to the visible window.

        Returns:
            Tuple of (clipped_start, clipped_end) in minutes since midnight.
            clipped_end may be <= clipped_start for events outside the window.
        """
        clipped_start = max(config.window_start_minute, resolved.start_minute)
        clipped_end = min(config.window_end_minute, resolved.end_minute)
        return clipped_start, clipped_end

    @staticmethod
    def is_visible(resolved: ResolvedEvent, config: LayoutConfig) -> bool:
        """Check whether any part of an event falls inside the window."""
        clipped_start, clipped_end = GeometryEngine.clip_to_window(resolved, config)
        return clipped_end > clipped_start

    @staticmethod
    def calculate_layout(
        resolved: ResolvedEvent,
        column_index: int,
        total_columns: int,
        config: LayoutConfig,
    ) -> EventLayout:
        """Compute the percentage rectangle for one packed event.

        Args:
            resolved: The event with its resolved span
            column_index: Column the packer placed the event in
            total_columns: Columns sharing the width (day-wide by default)
            config: Layout configuration

        Returns:
            EventLayout with top, height, left and width percentages
        """
        clipped_start, clipped_end = GeometryEngine.clip_to_window(resolved, config)
        window = config.window_duration

        height = max(0.0, percent_of(clipped_end - clipped_start, window))
        top = max(
            0.0,
            percent_of(clipped_start - config.window_start_minute, window)
            - config.top_offset_percent,
        )

        column_width = const.PERCENT_FULL / total_columns
        return {
            const.DATA_LAYOUT_TOP: top,
            const.DATA_LAYOUT_HEIGHT: height,
            const.DATA_LAYOUT_LEFT: column_index * column_width,
            const.DATA_LAYOUT_WIDTH: column_width,
        }

    @staticmethod
    def time_slot_labels(config: LayoutConfig) -> list[str]:
        """Return the label of every grid slot, top to bottom.

        Example:
            Defaults → ["7am", "8am", ..., "9pm"] (15 labels)
        """
        return [
            format_minute_label(
                config.window_start_minute
                + slot * config.window_duration // config.slot_count
            )
            for slot in range(config.slot_count)
        ]

    @staticmethod
    def to_css(layout: EventLayout) -> dict[str, str]:
        """Format a layout as CSS percentage strings ("50%", "12.5%")."""
        return {key: _format_percent(value) for key, value in layout.items()}


def _format_percent(value: float) -> str:
    """Format a percentage the way the grid's style attributes expect."""
    if float(value).is_integer():
        return f"{int(value)}%"
    return f"{value!r}%"
