"""Engine modules for FamilyHub.

Contains specialized computation engines for the calendar day view:
- event_engine: Event time resolution, diagnostics and overlap detection
- packing_engine: Greedy first-fit column packing and overlap structure
- geometry_engine: Percentage rectangles within the visible time window
- day_view_engine: Day/week orchestration and the deprecated label mode
"""

# Use relative imports within package to avoid mypy module resolution issues
from .day_view_engine import DayLayout, DayViewEngine, InvalidInputShapeError
from .event_engine import EventEngine, LayoutWarning, ResolvedEvent
from .geometry_engine import GeometryEngine
from .packing_engine import PackingEngine

__all__ = [
    "DayLayout",
    "DayViewEngine",
    "EventEngine",
    "GeometryEngine",
    "InvalidInputShapeError",
    "LayoutWarning",
    "PackingEngine",
    "ResolvedEvent",
]
