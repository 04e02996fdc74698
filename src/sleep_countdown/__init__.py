"""Sleep Countdown - time left until bedtime or wake-up"""

from sleep_countdown.core import (
    Phase,
    SleepSchedule,
    TimeOfDay,
    WindowState,
)
from sleep_countdown.exceptions import InvalidTimeOfDay, SleepCountdownError
from sleep_countdown.scheduling import (
    AlertPolicy,
    AlertSettings,
    DEFAULT_ALERTS,
    build_timeline,
    evaluate,
)

__version__ = "0.1.0"

__all__ = [
    "TimeOfDay",
    "SleepSchedule",
    "Phase",
    "WindowState",
    "AlertPolicy",
    "AlertSettings",
    "DEFAULT_ALERTS",
    "evaluate",
    "build_timeline",
    "InvalidTimeOfDay",
    "SleepCountdownError",
]
