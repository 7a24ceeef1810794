"""Packing Engine - Pure logic for assigning a day's events to columns.

This engine provides stateless, pure Python functions for:
- Stable start-time ordering of a day's events
- Greedy first-fit packing into the fewest non-overlapping columns
- Maximum concurrency (clique number) of a day's events
- Overlap clusters (groups transitively connected by overlap)

ARCHITECTURE: This is a pure logic engine. All functions are static methods
that operate on passed-in data.

The conflict graph of one day's events is an interval graph, so first-fit
over start-ordered events always uses exactly `max_concurrency` columns.
Packing is O(n²) in the number of events: every candidate column is scanned
member by member. Daily counts are tens of events, and several hundred stay
well within a single render pass.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .event_engine import EventEngine, ResolvedEvent

# Sweep boundary kinds, in processing order for a shared minute
_END = 0
_POINT = 1
_START = 2


class PackingEngine:
    """Pure logic engine for column packing and overlap structure.

    All methods expect the events of a single calendar day.
    """

    @staticmethod
    def sort_events(events: Iterable[ResolvedEvent]) -> list[ResolvedEvent]:
        """Sort events by start minute, keeping input order for ties.

        The tie order decides which column each event lands in, so the sort
        must be stable.
        """
        return sorted(events, key=lambda resolved: resolved.start_minute)

    @staticmethod
    def pack_columns(events: Sequence[ResolvedEvent]) -> list[list[ResolvedEvent]]:
        """Assign start-ordered events to columns with greedy first-fit.

        Each event goes into the first column where it overlaps no member;
        if every column has a conflict a new column is appended.

        Args:
            events: One day's events, already sorted with sort_events()

        Returns:
            Columns in index order, each listing its events in placement order
        """
        columns: list[list[ResolvedEvent]] = []

        for resolved in events:
            for column in columns:
                if not any(
                    EventEngine.events_overlap(member, resolved) for member in column
                ):
                    column.append(resolved)
                    break
            else:
                columns.append([resolved])

        return columns

    @staticmethod
    def column_index_map(columns: Sequence[Sequence[ResolvedEvent]]) -> dict[int, int]:
        """Map each event's input index to the column it was packed into."""
        return {
            resolved.index: column_index
            for column_index, column in enumerate(columns)
            for resolved in column
        }

    @staticmethod
    def max_concurrency(events: Iterable[ResolvedEvent]) -> int:
        """Return the size of the largest set of mutually overlapping events.

        For spans this is the most events active at one instant, with ends
        processed before starts at the same minute (half-open spans). A
        zero-duration event at minute m conflicts only with spans strictly
        around m, so it adds one to the spans active just after the ends at
        m and before the starts at m. Any non-empty day needs at least 1.
        """
        boundaries: list[tuple[int, int]] = []
        has_events = False

        for resolved in events:
            has_events = True
            if resolved.duration_minutes <= 0:
                boundaries.append((resolved.start_minute, _POINT))
                continue
            boundaries.append((resolved.start_minute, _START))
            boundaries.append((resolved.end_minute, _END))

        if not has_events:
            return 0

        boundaries.sort()
        active = 0
        peak = 1
        for _minute, kind in boundaries:
            if kind == _END:
                active -= 1
            elif kind == _START:
                active += 1
                peak = max(peak, active)
            else:
                peak = max(peak, active + 1)

        return peak

    @staticmethod
    def overlap_clusters(events: Sequence[ResolvedEvent]) -> list[list[ResolvedEvent]]:
        """Group start-ordered events into maximal transitively-overlapping clusters.

        A zero-duration event joins the current cluster only when one of its
        spans strictly surrounds it; it never extends the cluster. Otherwise
        it overlaps nothing and forms a cluster of its own.

        Args:
            events: One day's events, already sorted with sort_events()

        Returns:
            List of clusters, each listing its events in start order
        """
        clusters: list[list[ResolvedEvent]] = []
        current: list[ResolvedEvent] = []
        current_end = 0

        for resolved in events:
            if resolved.duration_minutes <= 0:
                if any(EventEngine.events_overlap(member, resolved) for member in current):
                    current.append(resolved)
                else:
                    clusters.append([resolved])
                continue

            if current and resolved.start_minute < current_end:
                current.append(resolved)
                current_end = max(current_end, resolved.end_minute)
                continue

            if current:
                clusters.append(current)
            current = [resolved]
            current_end = resolved.end_minute

        if current:
            clusters.append(current)

        return clusters
