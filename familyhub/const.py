# File: const.py
"""Constants for the FamilyHub calendar layout engine.

This file centralizes configuration keys, defaults, event field names and
diagnostic codes for consistency across the engines and helpers.
"""

import logging

# ------------------------------------------------------------------------------------------------
# Logging
# ------------------------------------------------------------------------------------------------
LOGGER = logging.getLogger(__package__)

# ------------------------------------------------------------------------------------------------
# Calendar Event Keys
# ------------------------------------------------------------------------------------------------
DATA_EVENT_ID = "id"
DATA_EVENT_START = "start"
DATA_EVENT_END = "end"
DATA_EVENT_LAYOUT = "layout"

# Layout rectangle keys (percent of the day column)
DATA_LAYOUT_TOP = "top"
DATA_LAYOUT_HEIGHT = "height"
DATA_LAYOUT_LEFT = "left"
DATA_LAYOUT_WIDTH = "width"

# ------------------------------------------------------------------------------------------------
# Layout Configuration Keys
# ------------------------------------------------------------------------------------------------
CONF_WINDOW_START_MINUTE = "window_start_minute"
CONF_WINDOW_END_MINUTE = "window_end_minute"
CONF_SLOT_COUNT = "slot_count"
CONF_DEFAULT_DURATION_MINUTES = "default_duration_minutes"
CONF_TOP_OFFSET_SLOTS = "top_offset_slots"
CONF_WIDTH_MODE = "width_mode"
CONF_OMIT_INVISIBLE = "omit_invisible"

# Width modes
WIDTH_MODE_DAY = "day"
WIDTH_MODE_CLUSTER = "cluster"
WIDTH_MODE_OPTIONS = [WIDTH_MODE_DAY, WIDTH_MODE_CLUSTER]

# ------------------------------------------------------------------------------------------------
# Layout Defaults
# ------------------------------------------------------------------------------------------------
MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 1440

DEFAULT_WINDOW_START_MINUTE = 7 * MINUTES_PER_HOUR  # 07:00
DEFAULT_WINDOW_END_MINUTE = 22 * MINUTES_PER_HOUR  # 22:00
DEFAULT_SLOT_COUNT = 15  # One slot per visible hour
DEFAULT_DURATION_MINUTES = 60
DEFAULT_TOP_OFFSET_SLOTS = 0.5  # Half a slot, centers short events on gridlines
DEFAULT_WIDTH_MODE = WIDTH_MODE_DAY
DEFAULT_OMIT_INVISIBLE = False

PERCENT_FULL = 100.0

# ------------------------------------------------------------------------------------------------
# Diagnostics
# ------------------------------------------------------------------------------------------------
WARNING_MALFORMED_TIME_VALUE = "malformed_time_value"
WARNING_NEGATIVE_OR_ZERO_DURATION = "negative_or_zero_duration"
WARNING_UNDATED_EVENT = "undated_event"

# ------------------------------------------------------------------------------------------------
# Week View
# ------------------------------------------------------------------------------------------------
WEEKDAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
WEEKDAY_NAMES = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]
