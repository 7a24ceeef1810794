# File: utils/dt_utils.py
"""Date and time utilities for FamilyHub.

Pure Python date/time functions with ZERO imports from the engines.
All functions here can be unit tested in isolation.

Uses standard library: datetime, zoneinfo, dateutil.

Functions:
    - dt_today_local: Get today's date in local timezone
    - dt_parse_date: Parse date strings
    - dt_parse_event_start: Parse an event start into a wall-clock datetime
    - dt_extract_date: Best-effort calendar date from a start value
    - parse_clock_minutes: Parse "HH:MM" / time / datetime into minutes since midnight
    - minutes_since_midnight: Wall-clock minutes of a datetime
    - week_days: Monday-first dates of the week containing a date
    - weekday_label: Short weekday label ("Mon") of a date
    - format_minute_label: Grid label text for a minute ("7am", "12:30pm")
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
import logging
import re
from zoneinfo import ZoneInfo

# Third-party date utilities
from dateutil.parser import isoparse, parse as parse_datetime
from dateutil.relativedelta import MO, relativedelta

# Module-level logger
_LOGGER = logging.getLogger(__name__)

# ==============================================================================
# Constants (local copies to avoid circular imports)
# These mirror const.py values but are defined locally for purity.
# ==============================================================================

# Default timezone - can be overridden by caller
DEFAULT_TIME_ZONE: ZoneInfo = ZoneInfo("UTC")

MINUTES_PER_HOUR = 60
DAYS_PER_WEEK = 7
WEEKDAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

# Fill-in defaults for lenient parsing; they differ in year, month and day
_FILL_FIRST = datetime(2000, 1, 1)
_FILL_SECOND = datetime(2001, 2, 2)

# "H:MM", "HH:MM" or "HH:MM:SS"
_CLOCK_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})(?::(\d{2}))?\s*$")


# ==============================================================================
# Timezone Configuration
# ==============================================================================


def set_default_timezone(tz: ZoneInfo) -> None:
    """Set the default timezone used to resolve "today".

    Args:
        tz: ZoneInfo object representing the household's timezone
    """
    global DEFAULT_TIME_ZONE  # noqa: PLW0603
    DEFAULT_TIME_ZONE = tz


def dt_today_local(tz: ZoneInfo | None = None) -> date:
    """Return today's date in local timezone as a `datetime.date`.

    Args:
        tz: Optional timezone override. Uses DEFAULT_TIME_ZONE if not provided.
    """
    return datetime.now(tz or DEFAULT_TIME_ZONE).date()


# ==============================================================================
# Date/Time Parsing
# ==============================================================================


def dt_parse_date(date_str: str | None) -> date | None:
    """Safely parse a date string into a `datetime.date`.

    Accepts formats:
    - "2025-04-07" (ISO format)
    - "04/07/2025" (US format)
    - "07/04/2025" (European format - attempted if US fails)

    Returns:
        datetime.date or None if parsing fails.
    """
    if not date_str or not isinstance(date_str, str):
        return None

    try:
        return date.fromisoformat(date_str.strip())
    except ValueError:
        pass

    for fmt in ("%m/%d/%Y", "%d/%m/%Y", "%Y/%m/%d"):
        try:
            return datetime.strptime(date_str.strip(), fmt).date()
        except ValueError:
            continue

    return None


def dt_parse_event_start(value: str | date | datetime | None) -> datetime | None:
    """Parse an event start into a datetime carrying the event's wall clock.

    ISO 8601 is tried first. Other strings are read leniently with dateutil
    ("2025-06-16 9:00 AM", "06/16/2025 09:00", "June 16, 2025 09:00") as
    long as they name a full calendar date. Offsets and a trailing "Z" are
    accepted but not converted: the clock reading in the value is the one
    the grid shows.

    A clock that rolls over onto another day ("2025-06-16T24:00") is
    rejected, so the event keeps the date it was written with.

    Args:
        value: ISO 8601 or other date-and-time string, date or datetime

    Returns:
        datetime, or None if the value cannot be read as a date and time.

    Example:
        >>> dt_parse_event_start("2024-06-10T14:00:00Z").hour
        14
    """
    if isinstance(value, datetime):
        return value

    if isinstance(value, date):
        return datetime.combine(value, time.min)

    if not value or not isinstance(value, str):
        return None

    text = value.strip()
    try:
        parsed = isoparse(text)
    except (ValueError, OverflowError):
        parsed = _parse_lenient(text)
        if parsed is None:
            return None

    written = dt_parse_date(text[:10])
    if written is not None and written != parsed.date():
        _LOGGER.debug("Event start %r rolls over to %s", value, parsed.date())
        return None

    return parsed


def _parse_lenient(text: str) -> datetime | None:
    """Read a non-ISO start with dateutil, requiring year, month and day.

    dateutil fills missing fields from a default datetime, so the text is
    parsed against two defaults that differ in every date field. Any
    difference in the results means the text left part of its date out.
    """
    try:
        first = parse_datetime(text, default=_FILL_FIRST)
        second = parse_datetime(text, default=_FILL_SECOND)
    except (ValueError, OverflowError) as exc:
        _LOGGER.debug("Unparsable event start %r: %s", text, exc)
        return None

    if first.date() != second.date():
        _LOGGER.debug("Event start %r has an incomplete date", text)
        return None

    return first


def dt_extract_date(value: str | date | datetime | None) -> date | None:
    """Return the calendar date of a start value, even if its clock is broken.

    "2024-06-10T25:99" yields 2024-06-10 so the event can still be placed
    on its day.
    """
    parsed = dt_parse_event_start(value)
    if parsed is not None:
        return parsed.date()

    if isinstance(value, str):
        # Date portion of an ISO datetime with an unreadable time part
        return dt_parse_date(value.strip()[:10])

    return None


def parse_clock_minutes(value: str | time | datetime | None) -> int | None:
    """Parse a clock value into minutes since midnight.

    Args:
        value: "HH:MM" (or "HH:MM:SS") string, time, or datetime

    Returns:
        Minutes since midnight (0-1439), or None if the value is not a
        valid clock reading. Seconds are truncated.

    Examples:
        parse_clock_minutes("09:30") → 570
        parse_clock_minutes("24:00") → None
        parse_clock_minutes("noon") → None
    """
    if isinstance(value, datetime):
        return minutes_since_midnight(value)

    if isinstance(value, time):
        return value.hour * MINUTES_PER_HOUR + value.minute

    if not isinstance(value, str):
        return None

    match = _CLOCK_PATTERN.match(value)
    if not match:
        return None

    hour = int(match.group(1))
    minute = int(match.group(2))
    second = int(match.group(3) or 0)
    if not (0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59):
        _LOGGER.debug("Clock value out of range: %s", value)
        return None

    return hour * MINUTES_PER_HOUR + minute


def minutes_since_midnight(dt_obj: datetime) -> int:
    """Return the wall-clock minutes since midnight of a datetime."""
    return dt_obj.hour * MINUTES_PER_HOUR + dt_obj.minute


# ==============================================================================
# Week Helpers
# ==============================================================================


def week_days(reference_date: date | datetime) -> list[date]:
    """Return the seven dates (Monday first) of the week containing a date.

    Example:
        >>> week_days(date(2025, 6, 15))[0]  # a Sunday
        datetime.date(2025, 6, 9)
    """
    if isinstance(reference_date, datetime):
        reference_date = reference_date.date()

    monday = reference_date + relativedelta(weekday=MO(-1))
    return [monday + timedelta(days=offset) for offset in range(DAYS_PER_WEEK)]


def weekday_label(day: date | datetime) -> str:
    """Return the short weekday label ("Mon".."Sun") for a date."""
    return WEEKDAY_LABELS[day.weekday()]


def format_minute_label(minute: int) -> str:
    """Format minutes since midnight as a grid label.

    Examples:
        format_minute_label(420) → "7am"
        format_minute_label(720) → "12pm"
        format_minute_label(0) → "12am"
        format_minute_label(810) → "1:30pm"
    """
    hour, mins = divmod(minute, MINUTES_PER_HOUR)
    hour %= 24
    suffix = "am" if hour < 12 else "pm"
    display_hour = hour % 12 or 12
    if mins:
        return f"{display_hour}:{mins:02d}{suffix}"
    return f"{display_hour}{suffix}"
