"""Day View Engine - Pure orchestration of the calendar day layout.

This engine provides stateless, pure Python functions for:
- Laying out one calendar date (filter → sort → pack → geometry)
- Laying out a Monday-first week as seven independent days
- Deprecated weekday-label matching kept for older callers

ARCHITECTURE: This is a pure logic engine. It holds no state between calls,
performs no I/O and never mutates its inputs, so identical inputs always
produce identical output and days may be computed concurrently. Callers
that re-render often should memoize results keyed by their event-set
version and the target date.

Per-event problems are recovered in place and reported as LayoutWarning
entries on the returned DayLayout. Only a caller contract violation (input
that is not a list of event mappings, or an unusable target date) raises.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Any
import warnings

from .. import const
from ..helpers.config_helpers import LayoutConfig, build_layout_config
from ..type_defs import PositionedEventData
from ..utils.dt_utils import dt_parse_date, dt_today_local, week_days, weekday_label
from .event_engine import EventEngine, LayoutWarning, ResolvedEvent
from .geometry_engine import GeometryEngine
from .packing_engine import PackingEngine

# =============================================================================
# ERRORS
# =============================================================================


class InvalidInputShapeError(Exception):
    """Raised when the assembler is called with input it cannot interpret.

    Attributes:
        argument: Name of the offending argument
        received_type: Type name of the value that was passed
    """

    def __init__(self, argument: str, received: Any, expected: str) -> None:
        """Initialize InvalidInputShapeError.

        Args:
            argument: Name of the offending argument
            received: The value that was passed
            expected: Description of what was expected
        """
        self.argument = argument
        self.received_type = type(received).__name__
        super().__init__(
            f"Invalid {argument}: expected {expected}, got {self.received_type}"
        )


# =============================================================================
# RESULT STRUCTURE
# =============================================================================


@dataclass
class DayLayout:
    """Positioned events for one day plus the diagnostics raised on the way.

    Attributes:
        day: The laid-out date (None in weekday-label mode)
        weekday: Short weekday label of the day ("Mon".."Sun")
        events: Positioned events in start order (not grouped by column)
        warnings: Non-fatal problems recovered while laying out the day
        column_count: Columns the packer used for the whole day
        is_today: Whether the day is today (set by layout_week only)
    """

    day: date | None
    weekday: str
    events: list[PositionedEventData] = field(default_factory=list)
    warnings: list[LayoutWarning] = field(default_factory=list)
    column_count: int = 0
    is_today: bool = False


# =============================================================================
# DAY VIEW ENGINE
# =============================================================================


class DayViewEngine:
    """Pure orchestration engine for day and week layouts.

    All methods are static - no instance state.
    """

    @staticmethod
    def layout_day(
        events: Sequence[Mapping[str, Any]],
        target_date: date | datetime | str,
        config: LayoutConfig | Mapping[str, Any] | None = None,
    ) -> DayLayout:
        """Lay out every event that falls on one calendar date.

        Args:
            events: List of calendar event mappings
            target_date: Date to lay out (date, datetime or ISO date string)
            config: LayoutConfig, raw config mapping, or None for defaults

        Returns:
            DayLayout with positioned events and warnings

        Raises:
            InvalidInputShapeError: If events is not a list of mappings or
                target_date cannot be read as a date
            LayoutConfigError: If a raw config mapping is invalid
        """
        layout_config = build_layout_config(config)
        _validate_events(events)
        day = _coerce_target_date(target_date)

        day_events, diagnostics = _resolve_matching(
            events, layout_config, lambda resolved: resolved.day == day
        )
        result = DayLayout(day=day, weekday=weekday_label(day), warnings=diagnostics)
        if not day_events:
            return result

        result.events, result.column_count = _assemble(day_events, layout_config)
        const.LOGGER.debug(
            "Laid out %d event(s) on %s in %d column(s)",
            len(result.events),
            day.isoformat(),
            result.column_count,
        )
        return result

    @staticmethod
    def layout_week(
        events: Sequence[Mapping[str, Any]],
        reference_date: date | datetime | str | None = None,
        config: LayoutConfig | Mapping[str, Any] | None = None,
    ) -> list[DayLayout]:
        """Lay out the Monday-first week containing a reference date.

        Each day is laid out independently with layout_day(); the entry for
        today (in the household timezone) has is_today set.

        Args:
            events: List of calendar event mappings
            reference_date: Any date within the week (defaults to today)
            config: LayoutConfig, raw config mapping, or None for defaults

        Returns:
            Seven DayLayout entries, Monday first
        """
        layout_config = build_layout_config(config)
        _validate_events(events)
        today = dt_today_local()
        reference = (
            today if reference_date is None else _coerce_target_date(reference_date)
        )

        week = [
            DayViewEngine.layout_day(events, day, layout_config)
            for day in week_days(reference)
        ]
        for day_layout in week:
            day_layout.is_today = day_layout.day == today
        return week

    @staticmethod
    def layout_weekday_label(
        events: Sequence[Mapping[str, Any]],
        label: str,
        config: LayoutConfig | Mapping[str, Any] | None = None,
    ) -> DayLayout:
        """Lay out every event whose weekday matches a label ("Mon".."Sun").

        DEPRECATED: matching by label ignores the week, so every Monday in
        the input is stacked into one column set. Use layout_day() with an
        explicit date instead.

        Raises:
            InvalidInputShapeError: If events is not a list of mappings or
                the label is not a weekday label
        """
        warnings.warn(
            "layout_weekday_label() conflates the same weekday across weeks; "
            "use layout_day() with an explicit date",
            DeprecationWarning,
            stacklevel=2,
        )
        const.LOGGER.warning(
            "DEPRECATED: Weekday-label layout requested for %r; "
            "events from different weeks will share columns",
            label,
        )

        layout_config = build_layout_config(config)
        _validate_events(events)
        normalized = _normalize_weekday_label(label)
        if normalized is None:
            raise InvalidInputShapeError("label", label, "a weekday label such as 'Mon'")

        day_events, diagnostics = _resolve_matching(
            events,
            layout_config,
            lambda resolved: weekday_label(resolved.day) == normalized,
        )
        result = DayLayout(day=None, weekday=normalized, warnings=diagnostics)
        if not day_events:
            return result

        # Same-label events from different weeks must collide like one day
        anchor = min(resolved.day for resolved in day_events)
        day_events = [replace(resolved, day=anchor) for resolved in day_events]

        result.events, result.column_count = _assemble(day_events, layout_config)
        return result


# =============================================================================
# INTERNAL HELPERS
# =============================================================================


def _validate_events(events: Any) -> None:
    """Raise InvalidInputShapeError unless events is a list/tuple of mappings."""
    if not isinstance(events, (list, tuple)):
        raise InvalidInputShapeError("events", events, "a list of event mappings")

    for event in events:
        if not isinstance(event, Mapping):
            raise InvalidInputShapeError("event", event, "an event mapping")


def _coerce_target_date(target_date: Any) -> date:
    """Read a target date from a date, datetime or ISO date string."""
    if isinstance(target_date, datetime):
        return target_date.date()
    if isinstance(target_date, date):
        return target_date
    if isinstance(target_date, str):
        parsed = dt_parse_date(target_date)
        if parsed is not None:
            return parsed

    raise InvalidInputShapeError("target_date", target_date, "a calendar date")


def _normalize_weekday_label(label: Any) -> str | None:
    """Return the short label for "Mon"/"Monday" (any case), else None."""
    if not isinstance(label, str):
        return None

    candidate = label.strip().title()
    if candidate in const.WEEKDAY_LABELS:
        return candidate
    if candidate in const.WEEKDAY_NAMES:
        return const.WEEKDAY_LABELS[const.WEEKDAY_NAMES.index(candidate)]
    return None


def _resolve_matching(
    events: Sequence[Mapping[str, Any]],
    config: LayoutConfig,
    matches: Callable[[ResolvedEvent], bool],
) -> tuple[list[ResolvedEvent], list[LayoutWarning]]:
    """Resolve all events and keep those accepted by `matches`.

    Warnings are kept for matching events and for events with no readable
    date, which cannot be attributed to any day.
    """
    matching: list[ResolvedEvent] = []
    diagnostics: list[LayoutWarning] = []

    for index, event in enumerate(events):
        resolved, event_warnings = EventEngine.resolve_event(event, index, config)
        if resolved is not None and not matches(resolved):
            continue

        for warning in event_warnings:
            const.LOGGER.warning("Calendar layout: %s", warning.message)
        diagnostics.extend(event_warnings)

        if resolved is not None:
            matching.append(resolved)

    return matching, diagnostics


def _assemble(
    day_events: list[ResolvedEvent], config: LayoutConfig
) -> tuple[list[PositionedEventData], int]:
    """Sort, pack and position one day's events.

    Returns:
        Tuple of (positioned events in start order, day-wide column count)
    """
    ordered = PackingEngine.sort_events(day_events)
    columns = PackingEngine.pack_columns(ordered)
    column_of = PackingEngine.column_index_map(columns)
    total_columns = len(columns)

    width_columns = dict.fromkeys(column_of, total_columns)
    if config.width_mode == const.WIDTH_MODE_CLUSTER:
        for cluster in PackingEngine.overlap_clusters(ordered):
            cluster_columns = max(column_of[resolved.index] for resolved in cluster) + 1
            for resolved in cluster:
                width_columns[resolved.index] = cluster_columns

    positioned: list[PositionedEventData] = []
    for resolved in ordered:
        if config.omit_invisible and not GeometryEngine.is_visible(resolved, config):
            continue

        layout = GeometryEngine.calculate_layout(
            resolved,
            column_of[resolved.index],
            width_columns[resolved.index],
            config,
        )
        positioned.append({**resolved.event, const.DATA_EVENT_LAYOUT: layout})  # type: ignore[typeddict-item]

    return positioned, total_columns
