"""Configuration management"""

from datetime import timedelta
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from sleep_countdown.core.display import DisplayLabels
from sleep_countdown.core.models import SleepSchedule, TimeOfDay
from sleep_countdown.logging import get_logger
from sleep_countdown.scheduling.calculator import AlertPolicy, AlertSettings

# Load .env file
load_dotenv()

logger = get_logger(__name__)


class ScheduleConfig(BaseSettings):
    """Bedtime and wake-up preferences"""
    bedtime: str = Field("22:00", alias="SLEEP_BEDTIME")
    wakeup: str = Field("07:00", alias="SLEEP_WAKEUP")

    @field_validator("bedtime", "wakeup")
    @classmethod
    def _valid_time(cls, value: str) -> str:
        # Raises InvalidTimeOfDay (a ValueError), reported as a ValidationError
        return str(TimeOfDay.parse(value))

    def schedule(self) -> SleepSchedule:
        return SleepSchedule(
            bedtime=TimeOfDay.parse(self.bedtime),
            wakeup=TimeOfDay.parse(self.wakeup),
        )


class AlertConfig(BaseSettings):
    """Running-low alert configuration

    Only one policy is active at a time. ``grace_period`` flags the user once
    they are still awake ``grace_minutes`` after bedtime; ``minimum_sleep``
    flags any point where less than ``minimum_sleep_hours`` is left before
    wake-up.
    """
    policy: AlertPolicy = Field(AlertPolicy.GRACE_PERIOD, alias="SLEEP_ALERT_POLICY")
    grace_minutes: int = Field(30, ge=0, alias="SLEEP_ALERT_GRACE_MINUTES")
    minimum_sleep_hours: float = Field(7.0, ge=0, alias="SLEEP_ALERT_MINIMUM_SLEEP_HOURS")

    def settings(self) -> AlertSettings:
        return AlertSettings(
            policy=self.policy,
            grace_period=timedelta(minutes=self.grace_minutes),
            minimum_sleep=timedelta(hours=self.minimum_sleep_hours),
        )


class DisplayConfig(BaseSettings):
    """Icons, captions and colours shown next to the countdown"""
    bedtime_icon: str = Field("bed.double.fill", alias="SLEEP_BEDTIME_ICON")
    wakeup_icon: str = Field("alarm.fill", alias="SLEEP_WAKEUP_ICON")
    alert_icon: str = Field("exclamationmark.triangle.fill", alias="SLEEP_ALERT_ICON")
    bedtime_text: str = Field("Time until bedtime", alias="SLEEP_BEDTIME_TEXT")
    wakeup_text: str = Field("Time until wake-up", alias="SLEEP_WAKEUP_TEXT")
    alert_text: str = Field("Sleep time running out!", alias="SLEEP_ALERT_TEXT")
    accent_color: Literal["blue", "red", "green", "purple"] = Field("blue", alias="SLEEP_ACCENT_COLOR")

    def labels(self) -> DisplayLabels:
        return DisplayLabels(
            bedtime_icon=self.bedtime_icon,
            wakeup_icon=self.wakeup_icon,
            alert_icon=self.alert_icon,
            bedtime_text=self.bedtime_text,
            wakeup_text=self.wakeup_text,
            alert_text=self.alert_text,
            accent_color=self.accent_color,
        )


class TimelineConfig(BaseSettings):
    """Widget timeline spacing"""
    widget_step_minutes: int = Field(15, gt=0, alias="SLEEP_WIDGET_STEP_MINUTES")
    control_step_minutes: int = Field(5, gt=0, alias="SLEEP_CONTROL_STEP_MINUTES")
    horizon_minutes: int = Field(60, gt=0, alias="SLEEP_TIMELINE_HORIZON_MINUTES")


class Config(BaseSettings):
    """Main configuration"""
    schedule: ScheduleConfig
    alerts: AlertConfig
    display: DisplayConfig
    timeline: TimelineConfig

    class Config:
        env_prefix = "SLEEP_COUNTDOWN_"
        env_nested_delimiter = "__"

    def __init__(self, **data):
        data.setdefault("schedule", ScheduleConfig())
        data.setdefault("alerts", AlertConfig())
        data.setdefault("display", DisplayConfig())
        data.setdefault("timeline", TimelineConfig())
        super().__init__(**data)


def get_config() -> Config:
    """Get configuration instance"""
    config = Config()
    logger.debug(
        "config.loaded",
        bedtime=config.schedule.bedtime,
        wakeup=config.schedule.wakeup,
        policy=config.alerts.policy.value,
    )
    return config
