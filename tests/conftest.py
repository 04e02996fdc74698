"""Shared fixtures for the test suite."""

import os

import pytest

from sleep_countdown.core.models import SleepSchedule, TimeOfDay


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep preference variables from the host out of the tests."""
    for name in list(os.environ):
        if name.upper().startswith("SLEEP_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def night_schedule():
    """22:00 bedtime, 07:00 wake-up (window crosses midnight)."""
    return SleepSchedule(bedtime=TimeOfDay(22, 0), wakeup=TimeOfDay(7, 0))
