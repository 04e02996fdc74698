"""Pre-computed countdown entries for widget timelines."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List

from sleep_countdown.core.models import SleepSchedule, WindowState
from sleep_countdown.logging import get_logger
from sleep_countdown.scheduling.calculator import DEFAULT_ALERTS, AlertSettings, evaluate

logger = get_logger(__name__)

WIDGET_STEP = timedelta(minutes=15)  # Home-screen widget
CONTROL_STEP = timedelta(minutes=5)  # Control widget
DEFAULT_HORIZON = timedelta(hours=1)


@dataclass(frozen=True)
class TimelineEntry:
    at: datetime
    state: WindowState


@dataclass(frozen=True)
class Timeline:
    """Entries to display in order, plus when the host should ask again"""

    entries: List[TimelineEntry]
    reload_at: datetime


def build_timeline(
    schedule: SleepSchedule,
    start: datetime,
    step: timedelta = WIDGET_STEP,
    horizon: timedelta = DEFAULT_HORIZON,
    alerts: AlertSettings = DEFAULT_ALERTS,
) -> Timeline:
    """Evaluate ``schedule`` every ``step`` from ``start`` until ``horizon``.

    Args:
        schedule: Bedtime and wake-up times of day
        start: First entry instant
        step: Spacing between entries
        horizon: How far ahead to pre-compute; the timeline asks to be
            reloaded once it is over

    Returns:
        Timeline whose entries are independent evaluations
    """
    if step <= timedelta(0):
        raise ValueError(f"step must be positive, got {step}")
    if horizon <= timedelta(0):
        raise ValueError(f"horizon must be positive, got {horizon}")

    entries: List[TimelineEntry] = []
    offset = timedelta(0)
    while offset < horizon:
        at = start + offset
        entries.append(TimelineEntry(at=at, state=evaluate(schedule, at, alerts)))
        offset += step

    logger.debug(
        "timeline.built",
        entries=len(entries),
        step_seconds=int(step.total_seconds()),
        first_phase=entries[0].state.phase.value,
        last_phase=entries[-1].state.phase.value,
    )
    return Timeline(entries=entries, reload_at=start + horizon)
