"""Shared helpers for projecting times of day onto absolute instants."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from sleep_countdown.core.models import TimeOfDay

ONE_DAY = timedelta(days=1)


def project_onto_day(time_of_day: TimeOfDay, now: datetime) -> datetime:
    """Return ``time_of_day`` on the same calendar day (and tzinfo) as ``now``."""
    return now.replace(
        hour=time_of_day.hour,
        minute=time_of_day.minute,
        second=0,
        microsecond=0,
    )


def next_occurrence(time_of_day: TimeOfDay, now: datetime) -> datetime:
    """Return the first occurrence of ``time_of_day`` at or after ``now``."""
    projected = project_onto_day(time_of_day, now)
    if projected < now:
        projected += ONE_DAY
    return projected


def previous_occurrence(time_of_day: TimeOfDay, now: datetime) -> datetime:
    """Return the latest occurrence of ``time_of_day`` strictly before ``now``."""
    return next_occurrence(time_of_day, now) - ONE_DAY


def elapsed_seconds(later: datetime, earlier: datetime) -> float:
    """Seconds from ``earlier`` to ``later``.

    Aware timestamps are compared in UTC so a DST shift between the two
    counts as real time; naive timestamps are compared as wall-clock values.
    """
    if later.tzinfo is not None and earlier.tzinfo is not None:
        later = later.astimezone(timezone.utc)
        earlier = earlier.astimezone(timezone.utc)
    return (later - earlier).total_seconds()
