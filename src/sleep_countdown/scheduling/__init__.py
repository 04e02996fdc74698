"""Sleep window calculation and widget timelines."""

from sleep_countdown.scheduling.calculator import AlertPolicy, AlertSettings, DEFAULT_ALERTS, evaluate
from sleep_countdown.scheduling.timeline import Timeline, TimelineEntry, build_timeline

__all__ = [
    "AlertPolicy",
    "AlertSettings",
    "DEFAULT_ALERTS",
    "evaluate",
    "Timeline",
    "TimelineEntry",
    "build_timeline",
]
