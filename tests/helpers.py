"""Timestamp helpers for tests."""

from datetime import datetime


def at(hour: int, minute: int = 0, second: int = 0, day: int = 24) -> datetime:
    """Naive timestamp on a fixed March 2025 day."""
    return datetime(2025, 3, day, hour, minute, second)
