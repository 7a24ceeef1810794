"""Type definitions for FamilyHub calendar data structures.

Calendar events arrive from the data layer as plain mappings. TypedDict
documents the keys the engines read; any additional keys (attendees, color,
member references) are carried through untouched.

NOTE: TypedDict is STATIC ANALYSIS ONLY. All runtime checks (missing keys,
unparsable values) are handled in the engines, never assumed from types.

IMPORTANT: This file must NOT import from engines or helpers to avoid
circular dependencies. Only typing machinery is imported here.
"""

from datetime import datetime, time
from typing import NotRequired, TypedDict

# =============================================================================
# Type Aliases (for readability)
# =============================================================================

EventId = str  # Opaque, stable across renders
ISODatetime = str  # ISO 8601 datetime string "2026-01-18T12:30:00"
ClockTime = str  # "HH:MM" clock string "13:45"


# =============================================================================
# Calendar Events
# =============================================================================


class CalendarEventData(TypedDict):
    """One scheduled occurrence as supplied by the data layer."""

    id: EventId
    title: str
    start: datetime | ISODatetime
    end: NotRequired[time | datetime | ClockTime | None]
    attendees: NotRequired[list[str]]
    color: NotRequired[str]


class EventLayout(TypedDict):
    """Rectangle within the day column, every value a percentage."""

    top: float
    height: float
    left: float
    width: float


class PositionedEventData(CalendarEventData):
    """Calendar event augmented with its computed layout rectangle."""

    layout: EventLayout
