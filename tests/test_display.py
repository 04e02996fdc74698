"""Tests for display helpers"""

from datetime import datetime

import pytest

from sleep_countdown.core.display import (
    ALERT_COLOR,
    BEDTIME_COLOR,
    DisplayLabels,
    describe,
    format_clock,
    format_compact,
    format_short,
    format_target_time,
    parse_clock,
)
from sleep_countdown.core.models import Phase, WindowState

TARGET = datetime(2025, 3, 24, 22, 0)


class TestFormatting:
    """Test remaining-time formats"""

    @pytest.mark.parametrize(
        "seconds,expected",
        [(0, "0:00:00"), (59, "0:00:59"), (27000, "7:30:00"), (90061, "25:01:01")],
    )
    def test_format_clock(self, seconds, expected):
        assert format_clock(seconds) == expected

    @pytest.mark.parametrize("seconds,expected", [(0, "00:00"), (59, "00:00"), (27000, "07:30"), (36000, "10:00")])
    def test_format_short(self, seconds, expected):
        assert format_short(seconds) == expected

    @pytest.mark.parametrize("seconds,expected", [(300, "0h 05m"), (36300, "10h 05m"), (27059, "7h 30m")])
    def test_format_compact(self, seconds, expected):
        assert format_compact(seconds) == expected

    @pytest.mark.parametrize("formatter", [format_clock, format_short, format_compact])
    def test_negative_rejected(self, formatter):
        with pytest.raises(ValueError):
            formatter(-1)

    @pytest.mark.parametrize(
        "hour,minute,expected",
        [(7, 5, "7:05 AM"), (0, 0, "12:00 AM"), (12, 30, "12:30 PM"), (22, 0, "10:00 PM")],
    )
    def test_format_target_time(self, hour, minute, expected):
        assert format_target_time(datetime(2025, 3, 24, hour, minute)) == expected


class TestParseClock:
    """Test parsing formatted durations back to seconds"""

    def test_parse_full(self):
        assert parse_clock("7:30:00") == 27000

    def test_parse_short(self):
        assert parse_clock("07:30") == 27000

    @pytest.mark.parametrize("text", ["7:60:00", "abc", "7", "7:30:5", "-1:00:00"])
    def test_parse_invalid(self, text):
        with pytest.raises(ValueError):
            parse_clock(text)

    def test_clock_format_recovers_seconds(self):
        for seconds in range(0, 2 * 86400, 997):
            assert parse_clock(format_clock(seconds)) == seconds

    def test_short_format_recovers_whole_minutes(self):
        assert parse_clock(format_short(27059)) == 27000


class TestDescribe:
    """Test icon, caption and colour selection"""

    def test_bedtime(self):
        presentation = describe(WindowState(Phase.BEDTIME, 60, 0.5, False, TARGET))
        assert presentation.icon == "bed.double.fill"
        assert presentation.text == "Time until bedtime"
        assert presentation.color == BEDTIME_COLOR

    def test_wakeup(self):
        presentation = describe(WindowState(Phase.WAKEUP, 60, 0.5, False, TARGET))
        assert presentation.icon == "alarm.fill"
        assert presentation.text == "Time until wake-up"
        assert presentation.color == "blue"

    def test_accent_color_drives_wakeup(self):
        labels = DisplayLabels(accent_color="green")
        presentation = describe(WindowState(Phase.WAKEUP, 60, 0.5, False, TARGET), labels)
        assert presentation.color == "green"

    def test_accent_color_not_used_for_alert(self):
        labels = DisplayLabels(accent_color="green")
        presentation = describe(WindowState(Phase.WAKEUP, 60, 0.5, True, TARGET), labels)
        assert presentation.color == ALERT_COLOR

    def test_running_low_wins(self):
        presentation = describe(WindowState(Phase.WAKEUP, 60, 0.5, True, TARGET))
        assert presentation.icon == "exclamationmark.triangle.fill"
        assert presentation.text == "Sleep time running out!"
        assert presentation.color == ALERT_COLOR

    def test_custom_labels(self):
        labels = DisplayLabels(bedtime_icon="moon", bedtime_text="Coucher")
        presentation = describe(WindowState(Phase.BEDTIME, 60, 0.5, False, TARGET), labels)
        assert presentation.icon == "moon"
        assert presentation.text == "Coucher"
