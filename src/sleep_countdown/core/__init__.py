"""Value types and presentation helpers."""

from sleep_countdown.core.models import Phase, SleepSchedule, TimeOfDay, WindowState

__all__ = [
    "TimeOfDay",
    "SleepSchedule",
    "Phase",
    "WindowState",
]
