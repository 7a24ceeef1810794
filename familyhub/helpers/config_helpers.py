# File: helpers/config_helpers.py
"""Layout configuration helpers for FamilyHub.

Raw configuration arrives from the calling application as a plain mapping
(often straight from stored user preferences). It is validated with a
voluptuous schema and frozen into a `LayoutConfig` that the engines share.

## Schema Keys ##
- window_start_minute / window_end_minute: visible clock window (07:00-22:00)
- slot_count: grid rows across the window, one per hour by default
- default_duration_minutes: duration assumed when an event has no end
- top_offset_slots: upward shift of every event, in slots (half a slot)
- width_mode: "day" (day-wide column count) or "cluster" (per overlap cluster)
- omit_invisible: drop events that fall entirely outside the window
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import voluptuous as vol

from .. import const

# =============================================================================
# ERRORS
# =============================================================================


class LayoutConfigError(ValueError):
    """Raised when a layout configuration mapping fails validation."""


# =============================================================================
# INPUT VALIDATION HELPERS
# =============================================================================


def validate_window(value: dict[str, Any]) -> dict[str, Any]:
    """Validate that the visible window has a positive duration.

    Raises:
        vol.Invalid: If the window end is not after the window start
    """
    start = value[const.CONF_WINDOW_START_MINUTE]
    end = value[const.CONF_WINDOW_END_MINUTE]
    if end <= start:
        raise vol.Invalid(
            f"Window end ({end}) must be after window start ({start})",
            path=[const.CONF_WINDOW_END_MINUTE],
        )
    return value


_MINUTE_OF_DAY = vol.All(vol.Coerce(int), vol.Range(min=0, max=const.MINUTES_PER_DAY))

LAYOUT_CONFIG_SCHEMA = vol.Schema(
    vol.All(
        {
            vol.Optional(
                const.CONF_WINDOW_START_MINUTE,
                default=const.DEFAULT_WINDOW_START_MINUTE,
            ): _MINUTE_OF_DAY,
            vol.Optional(
                const.CONF_WINDOW_END_MINUTE,
                default=const.DEFAULT_WINDOW_END_MINUTE,
            ): _MINUTE_OF_DAY,
            vol.Optional(const.CONF_SLOT_COUNT, default=const.DEFAULT_SLOT_COUNT): vol.All(
                vol.Coerce(int), vol.Range(min=1)
            ),
            vol.Optional(
                const.CONF_DEFAULT_DURATION_MINUTES,
                default=const.DEFAULT_DURATION_MINUTES,
            ): vol.All(vol.Coerce(int), vol.Range(min=1, max=const.MINUTES_PER_DAY)),
            vol.Optional(
                const.CONF_TOP_OFFSET_SLOTS, default=const.DEFAULT_TOP_OFFSET_SLOTS
            ): vol.All(vol.Coerce(float), vol.Range(min=0)),
            vol.Optional(const.CONF_WIDTH_MODE, default=const.DEFAULT_WIDTH_MODE): vol.In(
                const.WIDTH_MODE_OPTIONS
            ),
            vol.Optional(
                const.CONF_OMIT_INVISIBLE, default=const.DEFAULT_OMIT_INVISIBLE
            ): vol.Boolean(),
        }
    ),
    validate_window,
)


# =============================================================================
# LAYOUT CONFIG
# =============================================================================


@dataclass(frozen=True)
class LayoutConfig:
    """Validated, immutable layout configuration.

    Attributes:
        window_start_minute: First visible minute of the day grid
        window_end_minute: Last visible minute (exclusive) of the day grid
        slot_count: Number of equal rows the window is drawn with
        default_duration_minutes: Duration of events without an end
        top_offset_slots: Upward shift applied to every event, in slots
        width_mode: const.WIDTH_MODE_DAY or const.WIDTH_MODE_CLUSTER
        omit_invisible: Whether zero-height events are dropped from output
    """

    window_start_minute: int = const.DEFAULT_WINDOW_START_MINUTE
    window_end_minute: int = const.DEFAULT_WINDOW_END_MINUTE
    slot_count: int = const.DEFAULT_SLOT_COUNT
    default_duration_minutes: int = const.DEFAULT_DURATION_MINUTES
    top_offset_slots: float = const.DEFAULT_TOP_OFFSET_SLOTS
    width_mode: str = const.DEFAULT_WIDTH_MODE
    omit_invisible: bool = const.DEFAULT_OMIT_INVISIBLE

    @property
    def window_duration(self) -> int:
        """Visible window length in minutes."""
        return self.window_end_minute - self.window_start_minute

    @property
    def top_offset_percent(self) -> float:
        """Vertical offset subtracted from every top, as a percentage.

        With the defaults this is half a slot: 100 / 15 / 2.
        """
        return const.PERCENT_FULL / self.slot_count * self.top_offset_slots


DEFAULT_LAYOUT_CONFIG = LayoutConfig()


def build_layout_config(
    raw: LayoutConfig | Mapping[str, Any] | None = None,
) -> LayoutConfig:
    """Build a LayoutConfig from a raw mapping, applying defaults.

    Args:
        raw: Existing LayoutConfig (returned as-is), a mapping of
             CONF_* keys, or None for all defaults

    Returns:
        Validated LayoutConfig

    Raises:
        LayoutConfigError: If the mapping has unknown keys or invalid values
    """
    if raw is None:
        return DEFAULT_LAYOUT_CONFIG
    if isinstance(raw, LayoutConfig):
        return raw
    if not isinstance(raw, Mapping):
        raise LayoutConfigError(
            f"Layout config must be a mapping, got {type(raw).__name__}"
        )

    try:
        validated = LAYOUT_CONFIG_SCHEMA(dict(raw))
    except vol.Invalid as err:
        raise LayoutConfigError(f"Invalid layout config: {err}") from err

    return LayoutConfig(**validated)
