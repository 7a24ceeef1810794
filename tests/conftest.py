"""Shared fixtures for FamilyHub tests."""

# pylint: disable=redefined-outer-name  # Pytest fixtures

from collections.abc import Callable
from datetime import date
from typing import Any

import pytest

from familyhub.engines.event_engine import ResolvedEvent
from familyhub.helpers.config_helpers import DEFAULT_LAYOUT_CONFIG, LayoutConfig

# Monday; scenarios use the surrounding week
MONDAY = date(2025, 6, 16)


def make_event(
    event_id: str,
    start: str,
    end: str | None = None,
    day: date = MONDAY,
    **extra: Any,
) -> dict[str, Any]:
    """Build a calendar event mapping the way the data layer supplies it.

    Args:
        event_id: Event identifier (also used as the title)
        start: Clock time "HH:MM" on `day`
        end: Optional clock time "HH:MM"
        day: Calendar date of the event
        extra: Pass-through fields (attendees, color, ...)
    """
    event: dict[str, Any] = {
        "id": event_id,
        "title": event_id,
        "start": f"{day.isoformat()}T{start}:00",
        "attendees": [],
        "color": "bg-teal-500",
    }
    if end is not None:
        event["end"] = end
    event.update(extra)
    return event


def make_resolved(
    index: int, start_minute: int, end_minute: int, day: date = MONDAY
) -> ResolvedEvent:
    """Build a ResolvedEvent directly from minutes, bypassing parsing."""
    return ResolvedEvent(
        event={"id": f"evt-{index}"},
        index=index,
        day=day,
        start_minute=start_minute,
        end_minute=end_minute,
    )


@pytest.fixture
def layout_config() -> LayoutConfig:
    """Default layout configuration (07:00-22:00, 15 slots)."""
    return DEFAULT_LAYOUT_CONFIG


@pytest.fixture
def event_factory() -> Callable[..., dict[str, Any]]:
    """Factory fixture for calendar event mappings."""
    return make_event


@pytest.fixture
def resolved_factory() -> Callable[..., ResolvedEvent]:
    """Factory fixture for pre-resolved events."""
    return make_resolved


@pytest.fixture
def monday() -> date:
    """The Monday all single-day scenarios are placed on."""
    return MONDAY
