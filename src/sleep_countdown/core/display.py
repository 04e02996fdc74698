"""Rendering helpers shared by the CLI, widget timelines and live activity."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

from sleep_countdown.core.models import WindowState

_CLOCK_PATTERN = re.compile(r"^(\d+):([0-5]\d)(?::([0-5]\d))?$")


def _split(seconds: int) -> Tuple[int, int, int]:
    if seconds < 0:
        raise ValueError(f"seconds must be non-negative, got {seconds}")
    seconds = int(seconds)
    return seconds // 3600, (seconds % 3600) // 60, seconds % 60


def format_clock(seconds: int) -> str:
    """Render as ``H:MM:SS`` (live activity style)."""
    hours, minutes, secs = _split(seconds)
    return f"{hours}:{minutes:02d}:{secs:02d}"


def format_short(seconds: int) -> str:
    """Render as ``HH:MM`` (small widget style); seconds are dropped."""
    hours, minutes, _ = _split(seconds)
    return f"{hours:02d}:{minutes:02d}"


def format_compact(seconds: int) -> str:
    """Render as ``Xh YYm`` (medium widget style)."""
    hours, minutes, _ = _split(seconds)
    return f"{hours}h {minutes:02d}m"


def format_target_time(value: datetime) -> str:
    """12-hour clock with no leading zero, e.g. ``7:05 AM``."""
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {suffix}"


def parse_clock(text: str) -> int:
    """Turn ``H:MM:SS`` or ``HH:MM`` back into a number of seconds."""
    match = _CLOCK_PATTERN.match(text.strip())
    if not match:
        raise ValueError(f"Expected H:MM:SS or HH:MM, got {text!r}")
    hours, minutes, secs = match.groups()
    return int(hours) * 3600 + int(minutes) * 60 + int(secs or 0)


@dataclass(frozen=True)
class DisplayLabels:
    """User-customisable icons and captions"""

    bedtime_icon: str = "bed.double.fill"
    wakeup_icon: str = "alarm.fill"
    alert_icon: str = "exclamationmark.triangle.fill"
    bedtime_text: str = "Time until bedtime"
    wakeup_text: str = "Time until wake-up"
    alert_text: str = "Sleep time running out!"
    accent_color: str = "blue"  # Wake-up colour: blue | red | green | purple


@dataclass(frozen=True)
class Presentation:
    icon: str
    text: str
    color: str


BEDTIME_COLOR = "indigo"
ALERT_COLOR = "red"


def describe(state: WindowState, labels: DisplayLabels = DisplayLabels()) -> Presentation:
    """Pick icon, caption and colour for a computed window state."""
    if state.is_running_low:
        return Presentation(labels.alert_icon, labels.alert_text, ALERT_COLOR)
    if state.is_sleeping_period:
        return Presentation(labels.wakeup_icon, labels.wakeup_text, labels.accent_color)
    return Presentation(labels.bedtime_icon, labels.bedtime_text, BEDTIME_COLOR)
