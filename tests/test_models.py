"""Tests for value types"""

from datetime import datetime

import pytest

from sleep_countdown.core.models import Phase, SleepSchedule, TimeOfDay, WindowState
from sleep_countdown.exceptions import InvalidTimeOfDay, SleepCountdownError


class TestTimeOfDay:
    """Test TimeOfDay validation and parsing"""

    def test_valid_bounds(self):
        assert TimeOfDay(0, 0).minutes_since_midnight == 0
        assert TimeOfDay(23, 59).minutes_since_midnight == 23 * 60 + 59

    @pytest.mark.parametrize("hour,minute", [(24, 0), (-1, 0), (7, 60), (7, -1)])
    def test_out_of_range_rejected(self, hour, minute):
        """Out-of-range components fail instead of being clamped"""
        with pytest.raises(InvalidTimeOfDay):
            TimeOfDay(hour, minute)

    def test_error_carries_offending_value(self):
        with pytest.raises(InvalidTimeOfDay) as exc_info:
            TimeOfDay(25, 0)
        assert exc_info.value.hour == 25

    @pytest.mark.parametrize("hour,minute", [(True, 0), (7.5, 0), ("7", 0), (7, None)])
    def test_non_integer_rejected(self, hour, minute):
        with pytest.raises(InvalidTimeOfDay):
            TimeOfDay(hour, minute)

    def test_error_is_value_error(self):
        """Callers catching ValueError also catch invalid times"""
        with pytest.raises(ValueError):
            TimeOfDay(30, 0)
        assert issubclass(InvalidTimeOfDay, SleepCountdownError)

    @pytest.mark.parametrize(
        "text,expected",
        [("7:05", TimeOfDay(7, 5)), ("07:05", TimeOfDay(7, 5)), (" 22:00 ", TimeOfDay(22, 0)), ("0:00", TimeOfDay(0, 0))],
    )
    def test_parse(self, text, expected):
        assert TimeOfDay.parse(text) == expected

    @pytest.mark.parametrize("text", ["2200", "22-00", "", "ab:cd", "7:5", "24:00", "12:60"])
    def test_parse_rejects_bad_text(self, text):
        with pytest.raises(InvalidTimeOfDay) as exc_info:
            TimeOfDay.parse(text)
        assert exc_info.value.text == text

    def test_str_is_zero_padded(self):
        assert str(TimeOfDay(7, 5)) == "07:05"

    def test_from_datetime_drops_seconds(self):
        assert TimeOfDay.from_datetime(datetime(2025, 3, 24, 6, 45, 59)) == TimeOfDay(6, 45)

    def test_ordering(self):
        assert TimeOfDay(7, 0) < TimeOfDay(22, 0)


class TestSleepSchedule:
    """Test SleepSchedule helpers"""

    def test_default_schedule(self):
        schedule = SleepSchedule.default()
        assert schedule.bedtime == TimeOfDay(22, 0)
        assert schedule.wakeup == TimeOfDay(7, 0)
        assert schedule.is_degenerate is False

    def test_degenerate_schedule(self):
        assert SleepSchedule(TimeOfDay(8, 0), TimeOfDay(8, 0)).is_degenerate is True


class TestWindowState:
    """Test WindowState convenience flags"""

    def test_phase_flags(self):
        target = datetime(2025, 3, 24, 22, 0)
        bedtime = WindowState(Phase.BEDTIME, 60, 0.5, False, target)
        wakeup = WindowState(Phase.WAKEUP, 60, 0.5, False, target)
        assert bedtime.is_before_bedtime and not bedtime.is_sleeping_period
        assert wakeup.is_sleeping_period and not wakeup.is_before_bedtime

    def test_phase_values(self):
        assert Phase("bedtime") is Phase.BEDTIME
        assert Phase.WAKEUP.value == "wakeup"
