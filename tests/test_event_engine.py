"""Tests for EventEngine - time resolution and overlap detection.

Test Categories:
- Start/end resolution and the implicit default duration
- Recovery from malformed and inverted time values
- Half-open overlap semantics and cross-date isolation
"""

from __future__ import annotations

from datetime import date, datetime, time

import pytest

from familyhub import const
from familyhub.engines.event_engine import EventEngine, LayoutWarning
from familyhub.helpers.config_helpers import LayoutConfig

# =============================================================================
# Test: resolve_event
# =============================================================================


class TestResolveEvent:
    """Tests for reading an event's day and span."""

    def test_start_and_end_in_minutes(self, event_factory, layout_config) -> None:
        """09:00-10:30 resolves to 540-630 on its date."""
        event = event_factory("a", "09:00", "10:30")

        resolved, warnings = EventEngine.resolve_event(event, 0, layout_config)

        assert resolved is not None
        assert resolved.day == date(2025, 6, 16)
        assert resolved.start_minute == 540
        assert resolved.end_minute == 630
        assert resolved.event is event
        assert warnings == []

    def test_missing_end_uses_default_duration(
        self, event_factory, layout_config
    ) -> None:
        """No end means start + 60 minutes."""
        resolved, warnings = EventEngine.resolve_event(
            event_factory("a", "09:15"), 0, layout_config
        )

        assert resolved is not None
        assert resolved.end_minute == 555 + 60
        assert warnings == []

    def test_empty_end_string_uses_default_duration(
        self, event_factory, layout_config
    ) -> None:
        """Forms store an unset end as an empty string."""
        resolved, _ = EventEngine.resolve_event(
            event_factory("a", "09:00", ""), 0, layout_config
        )

        assert resolved is not None
        assert resolved.duration_minutes == 60

    def test_configured_default_duration(self, event_factory) -> None:
        """The implicit duration follows the configuration."""
        config = LayoutConfig(default_duration_minutes=30)

        resolved, _ = EventEngine.resolve_event(event_factory("a", "09:00"), 0, config)

        assert resolved is not None
        assert resolved.end_minute == 570

    def test_datetime_and_time_values(self, layout_config) -> None:
        """Native datetime start and time end are accepted."""
        event = {
            "id": "native",
            "start": datetime(2025, 6, 16, 14, 0),
            "end": time(15, 45),
        }

        resolved, warnings = EventEngine.resolve_event(event, 3, layout_config)

        assert resolved is not None
        assert resolved.index == 3
        assert (resolved.start_minute, resolved.end_minute) == (840, 945)
        assert warnings == []

    def test_utc_suffix_keeps_wall_clock(self, layout_config) -> None:
        """A trailing Z is accepted and the clock reading is kept as-is."""
        event = {"id": "z", "start": "2024-06-10T14:00:00Z", "end": "15:00"}

        resolved, _ = EventEngine.resolve_event(event, 0, layout_config)

        assert resolved is not None
        assert resolved.day == date(2024, 6, 10)
        assert resolved.start_minute == 840

    def test_input_is_not_mutated(self, event_factory, layout_config) -> None:
        """Resolution never writes to the caller's mapping."""
        event = event_factory("a", "09:00", "10:00")
        snapshot = dict(event)

        EventEngine.resolve_event(event, 0, layout_config)

        assert event == snapshot


# =============================================================================
# Test: recovery from bad time values
# =============================================================================


class TestResolveRecovery:
    """Tests for per-event recovery and diagnostics."""

    def test_unparsable_start_clock_is_zero_duration_at_midnight(
        self, layout_config
    ) -> None:
        """A readable date with a broken clock lands at 00:00, zero length."""
        event = {"id": "bad", "start": "2025-06-16Tnot-a-time", "end": "10:00"}

        resolved, warnings = EventEngine.resolve_event(event, 0, layout_config)

        assert resolved is not None
        assert resolved.day == date(2025, 6, 16)
        assert (resolved.start_minute, resolved.end_minute) == (0, 0)
        assert [w.code for w in warnings] == [const.WARNING_MALFORMED_TIME_VALUE]
        assert warnings[0].event_id == "bad"

    def test_hour_24_start_stays_on_its_written_date(self, layout_config) -> None:
        """An hour-24 start is a broken clock, not the next day's midnight."""
        event = {"id": "late", "start": "2025-06-16T24:00"}

        resolved, warnings = EventEngine.resolve_event(event, 0, layout_config)

        assert resolved is not None
        assert resolved.day == date(2025, 6, 16)
        assert (resolved.start_minute, resolved.end_minute) == (0, 0)
        assert [w.code for w in warnings] == [const.WARNING_MALFORMED_TIME_VALUE]

    def test_non_iso_start_is_read_leniently(self, layout_config) -> None:
        """A spelled-out start resolves without warnings."""
        event = {"id": "x", "start": "June 16, 2025 9:00 AM", "end": "10:00"}

        resolved, warnings = EventEngine.resolve_event(event, 0, layout_config)

        assert resolved is not None
        assert resolved.day == date(2025, 6, 16)
        assert (resolved.start_minute, resolved.end_minute) == (540, 600)
        assert warnings == []

    @pytest.mark.parametrize("bad_end", ["25:99", "noon", "9", "10:5", 42])
    def test_unparsable_end_is_zero_duration_at_midnight(
        self, event_factory, layout_config, bad_end
    ) -> None:
        """Unreadable end values fall back the same way as a broken start."""
        event = event_factory("a", "09:00")
        event["end"] = bad_end

        resolved, warnings = EventEngine.resolve_event(event, 0, layout_config)

        assert resolved is not None
        assert (resolved.start_minute, resolved.end_minute) == (0, 0)
        assert warnings[0].code == const.WARNING_MALFORMED_TIME_VALUE

    @pytest.mark.parametrize("end", ["09:00", "08:00"])
    def test_non_positive_duration_uses_default(
        self, event_factory, layout_config, end
    ) -> None:
        """End at or before start becomes start + default duration."""
        resolved, warnings = EventEngine.resolve_event(
            event_factory("a", "09:00", end), 0, layout_config
        )

        assert resolved is not None
        assert (resolved.start_minute, resolved.end_minute) == (540, 600)
        assert [w.code for w in warnings] == [const.WARNING_NEGATIVE_OR_ZERO_DURATION]

    @pytest.mark.parametrize("start", ["garbage", "", None, 12345])
    def test_undated_event_is_skipped(self, layout_config, start) -> None:
        """Without any readable date the event cannot be placed."""
        resolved, warnings = EventEngine.resolve_event(
            {"id": "lost", "start": start}, 0, layout_config
        )

        assert resolved is None
        assert warnings == [
            LayoutWarning(
                code=const.WARNING_UNDATED_EVENT,
                event_id="lost",
                message=warnings[0].message,
            )
        ]


# =============================================================================
# Test: events_overlap
# =============================================================================


class TestEventsOverlap:
    """Tests for the pairwise overlap check."""

    def test_partial_overlap(self, resolved_factory) -> None:
        """09:00-10:00 and 09:30-10:30 overlap."""
        first = resolved_factory(0, 540, 600)
        second = resolved_factory(1, 570, 630)

        assert EventEngine.events_overlap(first, second)
        assert EventEngine.events_overlap(second, first)

    def test_containment(self, resolved_factory) -> None:
        """An event fully inside another overlaps it."""
        assert EventEngine.events_overlap(
            resolved_factory(0, 540, 720), resolved_factory(1, 600, 630)
        )

    def test_touching_events_do_not_overlap(self, resolved_factory) -> None:
        """Ending at minute 600 and starting at minute 600 is not an overlap."""
        first = resolved_factory(0, 540, 600)
        second = resolved_factory(1, 600, 660)

        assert not EventEngine.events_overlap(first, second)
        assert not EventEngine.events_overlap(second, first)

    def test_disjoint_events(self, resolved_factory) -> None:
        """Separated events do not overlap."""
        assert not EventEngine.events_overlap(
            resolved_factory(0, 540, 600), resolved_factory(1, 660, 720)
        )

    def test_different_dates_never_overlap(self, resolved_factory) -> None:
        """Same clock span on different dates is not an overlap."""
        first = resolved_factory(0, 540, 600, day=date(2025, 6, 16))
        second = resolved_factory(1, 540, 600, day=date(2025, 6, 23))

        assert not EventEngine.events_overlap(first, second)

    def test_zero_duration_inside_span_overlaps(self, resolved_factory) -> None:
        """A zero-length event strictly inside a span overlaps it."""
        assert EventEngine.events_overlap(
            resolved_factory(0, 570, 570), resolved_factory(1, 540, 600)
        )

    @pytest.mark.parametrize("minute", [540, 600])
    def test_zero_duration_on_span_edge_does_not_overlap(
        self, resolved_factory, minute: int
    ) -> None:
        """A zero-length event at either edge of a span does not overlap it."""
        assert not EventEngine.events_overlap(
            resolved_factory(0, minute, minute), resolved_factory(1, 540, 600)
        )

    def test_zero_duration_pair_does_not_overlap(self, resolved_factory) -> None:
        """Two zero-length events at the same minute do not overlap."""
        assert not EventEngine.events_overlap(
            resolved_factory(0, 570, 570), resolved_factory(1, 570, 570)
        )
