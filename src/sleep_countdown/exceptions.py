"""Custom exceptions for Sleep Countdown"""

from typing import Optional


class SleepCountdownError(Exception):
    """Base class for errors raised by Sleep Countdown"""


class InvalidTimeOfDay(SleepCountdownError, ValueError):
    """Raised when a bedtime or wake-up time is outside the 24-hour clock"""

    def __init__(
        self,
        message: str,
        hour: Optional[object] = None,
        minute: Optional[object] = None,
        text: Optional[str] = None,
    ):
        """Initialize InvalidTimeOfDay

        Args:
            message: Exception message
            hour: Offending hour value, if known
            minute: Offending minute value, if known
            text: Raw text that failed to parse, if the value came from a string
        """
        super().__init__(message)
        self.hour = hour
        self.minute = minute
        self.text = text
