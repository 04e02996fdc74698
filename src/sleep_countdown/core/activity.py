"""Live activity snapshots derived from the sleep window calculation.

An activity has fixed attributes captured when it starts and a content
state that is recomputed from scratch on every refresh.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from sleep_countdown.core.models import SleepSchedule
from sleep_countdown.scheduling.calculator import DEFAULT_ALERTS, AlertSettings, evaluate
from sleep_countdown.scheduling.time_utils import next_occurrence

DEFAULT_ACTIVITY_NAME = "Sleep Timer"


@dataclass(frozen=True)
class ActivityAttributes:
    """Values fixed for the lifetime of one activity"""

    name: str
    schedule: SleepSchedule
    started_at: datetime
    ends_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "bedtime": str(self.schedule.bedtime),
            "wakeup": str(self.schedule.wakeup),
            "started_at": self.started_at.isoformat(),
            "ends_at": self.ends_at.isoformat(),
        }


@dataclass(frozen=True)
class ActivityContent:
    """Refreshable part of an activity"""

    seconds_remaining: int
    is_before_bedtime: bool
    is_sleeping_period: bool
    progress: float
    is_running_low: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seconds_remaining": self.seconds_remaining,
            "is_before_bedtime": self.is_before_bedtime,
            "is_sleeping_period": self.is_sleeping_period,
            "progress": self.progress,
            "is_running_low": self.is_running_low,
        }


def start_activity(
    schedule: SleepSchedule,
    started_at: datetime,
    name: str = DEFAULT_ACTIVITY_NAME,
) -> ActivityAttributes:
    """Capture attributes for an activity running until the next wake-up."""
    return ActivityAttributes(
        name=name,
        schedule=schedule,
        started_at=started_at,
        ends_at=next_occurrence(schedule.wakeup, started_at),
    )


def activity_content(
    attributes: ActivityAttributes,
    now: datetime,
    alerts: AlertSettings = DEFAULT_ALERTS,
) -> ActivityContent:
    state = evaluate(attributes.schedule, now, alerts)
    return ActivityContent(
        seconds_remaining=state.seconds_remaining,
        is_before_bedtime=state.is_before_bedtime,
        is_sleeping_period=state.is_sleeping_period,
        progress=state.progress_fraction,
        is_running_low=state.is_running_low,
    )


def is_expired(attributes: ActivityAttributes, now: datetime) -> bool:
    """True once the activity's wake-up has been reached."""
    return now >= attributes.ends_at
