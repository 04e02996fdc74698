"""Value types for sleep schedules and countdown results"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from sleep_countdown.exceptions import InvalidTimeOfDay

_TIME_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


def _check_component(name: str, value: object, upper: int) -> None:
    # bool is an int subclass; True:False is not a time
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidTimeOfDay(f"{name} must be an integer, got {value!r}", **{name: value})
    if not 0 <= value <= upper:
        raise InvalidTimeOfDay(f"{name} must be between 0 and {upper}, got {value}", **{name: value})


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """Wall-clock time with no date attached"""

    hour: int
    minute: int = 0

    def __post_init__(self) -> None:
        _check_component("hour", self.hour, 23)
        _check_component("minute", self.minute, 59)

    @classmethod
    def parse(cls, text: str) -> "TimeOfDay":
        """Build a TimeOfDay from ``H:MM`` or ``HH:MM`` text."""
        match = _TIME_PATTERN.match(text) if isinstance(text, str) else None
        if not match:
            raise InvalidTimeOfDay(f"Expected HH:MM, got {text!r}", text=str(text))
        try:
            return cls(int(match.group(1)), int(match.group(2)))
        except InvalidTimeOfDay as exc:
            exc.text = text
            raise

    @classmethod
    def from_datetime(cls, value: datetime) -> "TimeOfDay":
        """Keep only the hour and minute of a full timestamp."""
        return cls(value.hour, value.minute)

    @property
    def minutes_since_midnight(self) -> int:
        return self.hour * 60 + self.minute

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


@dataclass(frozen=True)
class SleepSchedule:
    """Bedtime and wake-up boundaries of a daily sleep window"""

    bedtime: TimeOfDay
    wakeup: TimeOfDay

    @classmethod
    def default(cls) -> "SleepSchedule":
        """22:00 to 07:00, used until the user picks their own times."""
        return cls(bedtime=TimeOfDay(22, 0), wakeup=TimeOfDay(7, 0))

    @property
    def is_degenerate(self) -> bool:
        """True when both boundaries coincide and the window has no length."""
        return self.bedtime == self.wakeup


class Phase(str, Enum):
    """Boundary the countdown is currently heading towards"""
    BEDTIME = "bedtime"  # Awake, counting down to bedtime
    WAKEUP = "wakeup"  # Sleeping, counting down to wake-up


@dataclass(frozen=True)
class WindowState:
    """Result of evaluating a schedule at one instant"""

    phase: Phase
    seconds_remaining: int
    progress_fraction: float
    is_running_low: bool
    target: datetime  # Projected instant of the boundary being counted down to

    @property
    def is_before_bedtime(self) -> bool:
        return self.phase is Phase.BEDTIME

    @property
    def is_sleeping_period(self) -> bool:
        return self.phase is Phase.WAKEUP
