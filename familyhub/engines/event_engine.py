"""Event Engine - Pure logic for event time resolution and overlap detection.

This engine provides stateless, pure Python functions for:
- Reading an event's calendar date and start/end minutes since midnight
- Recovering from malformed or inverted time values with diagnostics
- Pairwise overlap detection between events of the same day

ARCHITECTURE: This is a pure logic engine. All functions are static methods
that operate on passed-in data. Input event mappings are never mutated.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Any

from .. import const
from ..utils.dt_utils import (
    dt_extract_date,
    dt_parse_event_start,
    minutes_since_midnight,
    parse_clock_minutes,
)

if TYPE_CHECKING:
    from ..helpers.config_helpers import LayoutConfig


# =============================================================================
# DIAGNOSTICS
# =============================================================================


@dataclass(frozen=True)
class LayoutWarning:
    """Non-fatal problem found while laying out an event.

    Attributes:
        code: One of the const.WARNING_* codes
        event_id: Identifier of the offending event (None if it has none)
        message: Human-readable description for logs
    """

    code: str
    event_id: Any
    message: str


# =============================================================================
# RESOLVED EVENT
# =============================================================================


@dataclass(frozen=True)
class ResolvedEvent:
    """An event with its day and time span read into plain numbers.

    Attributes:
        event: The original event mapping (never modified)
        index: Position of the event in the caller's input sequence
        day: Calendar date the event belongs to
        start_minute: Minutes since midnight of the start
        end_minute: Minutes since midnight of the end (exclusive)
    """

    event: Mapping[str, Any]
    index: int
    day: date
    start_minute: int
    end_minute: int

    @property
    def event_id(self) -> Any:
        """Identifier of the wrapped event."""
        return self.event.get(const.DATA_EVENT_ID)

    @property
    def duration_minutes(self) -> int:
        """Length of the span in minutes."""
        return self.end_minute - self.start_minute


# =============================================================================
# EVENT ENGINE
# =============================================================================


class EventEngine:
    """Pure logic engine for event time resolution and overlap checks.

    All methods are static - no instance state.
    """

    @staticmethod
    def resolve_event(
        event: Mapping[str, Any],
        index: int,
        config: LayoutConfig,
    ) -> tuple[ResolvedEvent | None, list[LayoutWarning]]:
        """Read an event's day and start/end minutes.

        Recovery rules:
        - Unparsable start or end clock: zero-duration at 00:00 on the
          event's date, with a malformed_time_value warning.
        - End at or before start: default duration from the start, with a
          negative_or_zero_duration warning.
        - No readable date at all: the event is skipped (None) with an
          undated_event warning.

        Args:
            event: Calendar event mapping
            index: Position of the event in the input sequence
            config: Layout configuration (for the default duration)

        Returns:
            Tuple of (ResolvedEvent or None, list of warnings)
        """
        event_id = event.get(const.DATA_EVENT_ID)
        raw_start = event.get(const.DATA_EVENT_START)
        warnings: list[LayoutWarning] = []

        start_dt = dt_parse_event_start(raw_start)
        if start_dt is None:
            day = dt_extract_date(raw_start)
            if day is None:
                warnings.append(
                    LayoutWarning(
                        code=const.WARNING_UNDATED_EVENT,
                        event_id=event_id,
                        message=f"Event {event_id!r} has no readable date: {raw_start!r}",
                    )
                )
                return None, warnings

            warnings.append(
                LayoutWarning(
                    code=const.WARNING_MALFORMED_TIME_VALUE,
                    event_id=event_id,
                    message=f"Event {event_id!r} has an unparsable start: {raw_start!r}",
                )
            )
            return ResolvedEvent(event, index, day, 0, 0), warnings

        day = start_dt.date()
        start_minute = minutes_since_midnight(start_dt)
        raw_end = event.get(const.DATA_EVENT_END)

        if raw_end is None or raw_end == "":
            end_minute = start_minute + config.default_duration_minutes
            return ResolvedEvent(event, index, day, start_minute, end_minute), warnings

        end_minute = parse_clock_minutes(raw_end)
        if end_minute is None:
            warnings.append(
                LayoutWarning(
                    code=const.WARNING_MALFORMED_TIME_VALUE,
                    event_id=event_id,
                    message=f"Event {event_id!r} has an unparsable end: {raw_end!r}",
                )
            )
            return ResolvedEvent(event, index, day, 0, 0), warnings

        if end_minute <= start_minute:
            warnings.append(
                LayoutWarning(
                    code=const.WARNING_NEGATIVE_OR_ZERO_DURATION,
                    event_id=event_id,
                    message=(
                        f"Event {event_id!r} ends at or before its start "
                        f"({raw_end!r}); using {config.default_duration_minutes} minutes"
                    ),
                )
            )
            end_minute = start_minute + config.default_duration_minutes

        return ResolvedEvent(event, index, day, start_minute, end_minute), warnings

    @staticmethod
    def events_overlap(first: ResolvedEvent, second: ResolvedEvent) -> bool:
        """Check whether two events' time spans intersect.

        Spans are half-open: an event ending at 10:00 does not overlap one
        starting at 10:00. Events on different dates never overlap.
        """
        if first.day != second.day:
            return False
        return (
            first.start_minute < second.end_minute
            and second.start_minute < first.end_minute
        )
