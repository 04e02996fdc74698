"""Command line interface for Sleep Countdown."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from loguru import logger
from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table

from sleep_countdown.config import Config, get_config
from sleep_countdown.core.activity import DEFAULT_ACTIVITY_NAME, activity_content, is_expired, start_activity
from sleep_countdown.core.display import (
    DisplayLabels,
    describe,
    format_clock,
    format_compact,
    format_short,
    format_target_time,
)
from sleep_countdown.core.models import SleepSchedule, TimeOfDay
from sleep_countdown.exceptions import InvalidTimeOfDay
from sleep_countdown.scheduling.calculator import AlertPolicy, AlertSettings, evaluate
from sleep_countdown.scheduling.timeline import build_timeline


# Display colour names to Rich styles; "indigo" and "purple" are not Rich colour names
_RICH_STYLES = {
    "indigo": "#4B0082",
    "purple": "#800080",
    "blue": "blue",
    "red": "red",
    "green": "green",
}


@dataclass
class CLIContext:
    """Holds resolved inputs shared by CLI commands."""

    schedule: SleepSchedule
    alerts: AlertSettings
    labels: DisplayLabels
    now: datetime
    config: Config


def _parse_instant(value: Optional[str]) -> datetime:
    if not value:
        return datetime.now()
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid timestamp {value!r}: expected ISO-8601") from exc


def build_context(args: argparse.Namespace) -> CLIContext:
    """Merge configuration with command-line overrides."""

    config = get_config()
    schedule = config.schedule.schedule()
    if args.bedtime or args.wakeup:
        schedule = SleepSchedule(
            bedtime=TimeOfDay.parse(args.bedtime) if args.bedtime else schedule.bedtime,
            wakeup=TimeOfDay.parse(args.wakeup) if args.wakeup else schedule.wakeup,
        )

    alerts = config.alerts.settings()
    if args.policy:
        alerts = AlertSettings(
            policy=AlertPolicy(args.policy),
            grace_period=alerts.grace_period,
            minimum_sleep=alerts.minimum_sleep,
        )

    return CLIContext(
        schedule=schedule,
        alerts=alerts,
        labels=config.display.labels(),
        now=_parse_instant(args.at),
        config=config,
    )


def command_status(ctx: CLIContext, console: Optional[Console] = None) -> int:
    """Render the countdown at a single instant."""

    console = console or Console()
    state = evaluate(ctx.schedule, ctx.now, ctx.alerts)
    presentation = describe(state, ctx.labels)

    table = Table.grid(padding=(0, 2))
    table.add_column(justify="right", style="bold cyan")
    table.add_column(justify="left")
    table.add_row("Phase", state.phase.value)
    table.add_row("Remaining", f"[bold]{format_clock(state.seconds_remaining)}[/]")
    table.add_row("Target", format_target_time(state.target))
    table.add_row("Schedule", f"{ctx.schedule.bedtime} → {ctx.schedule.wakeup}")
    table.add_row("Progress", f"{state.progress_fraction * 100:.0f}%")
    table.add_row("", ProgressBar(total=1.0, completed=state.progress_fraction, width=30))
    if state.is_running_low:
        table.add_row("Alert", f"[bold red]{ctx.labels.alert_text}[/]")

    console.print(Panel(table, title=presentation.text, border_style=_RICH_STYLES.get(presentation.color, "white")))
    return 0


def command_timeline(
    ctx: CLIContext,
    step_minutes: Optional[int] = None,
    horizon_minutes: Optional[int] = None,
    control: bool = False,
    console: Optional[Console] = None,
) -> int:
    """Render the entries a widget would be handed."""

    console = console or Console()
    settings = ctx.config.timeline
    if step_minutes is None:
        step_minutes = settings.control_step_minutes if control else settings.widget_step_minutes
    if horizon_minutes is None:
        horizon_minutes = settings.horizon_minutes
    if step_minutes <= 0 or horizon_minutes <= 0:
        print("Step and horizon must be positive", file=sys.stderr)
        return 1

    timeline = build_timeline(
        ctx.schedule,
        ctx.now,
        step=timedelta(minutes=step_minutes),
        horizon=timedelta(minutes=horizon_minutes),
        alerts=ctx.alerts,
    )

    table = Table(box=box.ROUNDED, expand=True, title="Widget Timeline")
    table.add_column("At", style="bold cyan")
    table.add_column("Phase")
    table.add_column("Remaining", justify="right")
    table.add_column("Short", justify="right")
    table.add_column("Progress", justify="right")
    table.add_column("Alert", justify="center")
    for entry in timeline.entries:
        state = entry.state
        table.add_row(
            entry.at.strftime("%H:%M"),
            state.phase.value,
            format_compact(state.seconds_remaining),
            format_short(state.seconds_remaining),
            f"{state.progress_fraction * 100:.0f}%",
            "[red]![/]" if state.is_running_low else "",
        )

    console.print(table)
    console.print(f"[dim]Reload at {timeline.reload_at:%Y-%m-%d %H:%M}[/dim]")
    return 0


def command_activity(ctx: CLIContext, started_at: Optional[datetime] = None, name: str = DEFAULT_ACTIVITY_NAME) -> int:
    """Print a live activity snapshot as JSON."""

    attributes = start_activity(ctx.schedule, started_at or ctx.now, name=name)
    if is_expired(attributes, ctx.now):
        logger.warning("Activity started at {} already ended at {}", attributes.started_at, attributes.ends_at)
    content = activity_content(attributes, ctx.now, ctx.alerts)
    payload = {
        "attributes": attributes.to_dict(),
        "content": content.to_dict(),
        "expired": is_expired(attributes, ctx.now),
    }
    print(json.dumps(payload, indent=2))
    return 0


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--at", help="Evaluate at this ISO-8601 timestamp (default: now)")
    parser.add_argument("--bedtime", help="Override bedtime (HH:MM)")
    parser.add_argument("--wakeup", help="Override wake-up time (HH:MM)")
    parser.add_argument(
        "--policy",
        choices=[policy.value for policy in AlertPolicy],
        help="Running-low alert policy",
    )


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser."""

    parser = argparse.ArgumentParser(description="Sleep Countdown command line interface")

    subparsers = parser.add_subparsers(dest="command", required=True)

    status_parser = subparsers.add_parser("status", help="Show the countdown to the next bedtime or wake-up")
    _add_common_arguments(status_parser)

    timeline_parser = subparsers.add_parser("timeline", help="Show pre-computed widget timeline entries")
    _add_common_arguments(timeline_parser)
    timeline_parser.add_argument("--step-minutes", type=int, help="Minutes between entries")
    timeline_parser.add_argument("--horizon-minutes", type=int, help="Minutes covered by the timeline")
    timeline_parser.add_argument("--control", action="store_true", help="Use the control widget spacing")

    activity_parser = subparsers.add_parser("activity", help="Print a live activity snapshot as JSON")
    _add_common_arguments(activity_parser)
    activity_parser.add_argument("--started-at", help="When the activity started (ISO-8601, default: --at)")
    activity_parser.add_argument("--name", default=DEFAULT_ACTIVITY_NAME, help="Activity name")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        ctx = build_context(args)
        started_at = _parse_instant(args.started_at) if getattr(args, "started_at", None) else None
    except InvalidTimeOfDay as exc:
        print(f"Invalid time: {exc}", file=sys.stderr)
        return 2
    except argparse.ArgumentTypeError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    except ValidationError as exc:
        logger.error("Configuration rejected: {}", exc)
        return 2

    if started_at is not None and (started_at.tzinfo is None) != (ctx.now.tzinfo is None):
        print("--started-at and --at must both have a UTC offset or both omit it", file=sys.stderr)
        return 2

    if args.command == "status":
        return command_status(ctx)

    if args.command == "timeline":
        return command_timeline(ctx, args.step_minutes, args.horizon_minutes, args.control)

    if args.command == "activity":
        return command_activity(ctx, started_at, args.name)

    parser.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":  # pragma: no cover - manual execution
    sys.exit(main())
