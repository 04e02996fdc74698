"""Sleep window calculation: which boundary is next, and how far away it is.

Every consumer (status view, widget timelines, live activity) goes through
:func:`evaluate`. It reads no clock and keeps no state, so the same
``(schedule, now)`` always gives the same :class:`WindowState`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from sleep_countdown.core.models import Phase, SleepSchedule, WindowState
from sleep_countdown.scheduling.time_utils import elapsed_seconds, next_occurrence, previous_occurrence

DEFAULT_GRACE_PERIOD = timedelta(minutes=30)
DEFAULT_MINIMUM_SLEEP = timedelta(hours=7)


class AlertPolicy(str, Enum):
    """Rule deciding when the user is running low on sleep"""
    GRACE_PERIOD = "grace_period"  # Still awake too long after bedtime
    MINIMUM_SLEEP = "minimum_sleep"  # Less than the minimum left before wake-up


@dataclass(frozen=True)
class AlertSettings:
    """Alert policy plus its thresholds"""

    policy: AlertPolicy = AlertPolicy.GRACE_PERIOD
    grace_period: timedelta = DEFAULT_GRACE_PERIOD
    minimum_sleep: timedelta = DEFAULT_MINIMUM_SLEEP


DEFAULT_ALERTS = AlertSettings()


def _fraction(elapsed: float, span: float) -> float:
    if span <= 0:
        return 1.0
    return min(1.0, max(0.0, elapsed / span))


def _is_running_low(
    alerts: AlertSettings,
    since_bedtime: float,
    until_wakeup: float,
) -> bool:
    if alerts.policy is AlertPolicy.MINIMUM_SLEEP:
        return until_wakeup < alerts.minimum_sleep.total_seconds()
    return since_bedtime > alerts.grace_period.total_seconds()


def evaluate(
    schedule: SleepSchedule,
    now: datetime,
    alerts: AlertSettings = DEFAULT_ALERTS,
) -> WindowState:
    """Compute the countdown state of ``schedule`` at ``now``.

    Both boundaries are projected onto ``now``'s calendar day and pushed one
    day forward when already past, so both lie at or after ``now``. The
    nearer one is the target; on a tie the wake-up boundary wins.

    Args:
        schedule: Bedtime and wake-up times of day
        now: Instant to evaluate at, naive or timezone-aware
        alerts: Running-low policy and thresholds

    Returns:
        WindowState for this instant
    """
    next_bedtime = next_occurrence(schedule.bedtime, now)
    next_wakeup = next_occurrence(schedule.wakeup, now)
    # Ambiguous wall times around a DST fall-back can measure slightly negative
    to_bedtime = max(0.0, elapsed_seconds(next_bedtime, now))
    to_wakeup = max(0.0, elapsed_seconds(next_wakeup, now))

    if schedule.is_degenerate:
        # One boundary a day: progress runs through the 24 hours since it last passed
        last_boundary = previous_occurrence(schedule.wakeup, now)
        return WindowState(
            phase=Phase.WAKEUP,
            seconds_remaining=int(to_wakeup),
            progress_fraction=_fraction(
                elapsed_seconds(now, last_boundary),
                elapsed_seconds(next_wakeup, last_boundary),
            ),
            is_running_low=False,
            target=next_wakeup,
        )

    if to_bedtime < to_wakeup:
        # Awake: progress runs through the waking span since the last wake-up
        last_wakeup = previous_occurrence(schedule.wakeup, now)
        progress = _fraction(
            elapsed_seconds(now, last_wakeup),
            elapsed_seconds(next_bedtime, last_wakeup),
        )
        return WindowState(
            phase=Phase.BEDTIME,
            seconds_remaining=int(to_bedtime),
            progress_fraction=progress,
            is_running_low=False,
            target=next_bedtime,
        )

    last_bedtime = previous_occurrence(schedule.bedtime, now)
    since_bedtime = elapsed_seconds(now, last_bedtime)
    return WindowState(
        phase=Phase.WAKEUP,
        seconds_remaining=int(to_wakeup),
        progress_fraction=_fraction(since_bedtime, elapsed_seconds(next_wakeup, last_bedtime)),
        is_running_low=_is_running_low(alerts, since_bedtime, to_wakeup),
        target=next_wakeup,
    )
