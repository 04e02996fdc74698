"""Structured logging setup for Sleep Countdown.

Log records go through structlog processors and are rendered on a Rich
console (stderr). When ``SLEEP_COUNTDOWN_LOG_DIR`` is set, a JSONL copy of
every record is also written there, one file per day.
"""

from __future__ import annotations

import logging
import os
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
from rich.console import Console

__all__ = [
    "configure_logging",
    "get_logger",
]

_CONFIGURED = False
_CONSOLE = Console(soft_wrap=True, stderr=True)

_LEVEL_STYLES: Dict[str, str] = {
    "CRITICAL": "bold white on red",
    "ERROR": "red",
    "WARNING": "yellow",
    "INFO": "white",
    "DEBUG": "cyan",
}


class RichConsoleHandler(logging.Handler):
    """Logging handler that prints through the shared Rich console."""

    def __init__(self, console: Console = _CONSOLE) -> None:
        super().__init__()
        self.console = console

    def emit(self, record: logging.LogRecord) -> None:  # pragma: no cover - thin wrapper
        try:
            self.console.print(self.format(record), markup=True, highlight=False)
        except Exception:  # pragma: no cover - safety net
            self.handleError(record)


class EventDelta:
    """Add milliseconds elapsed since the previous event of the same logger."""

    def __init__(self) -> None:
        self._last_seen: Dict[str, float] = {}

    def __call__(self, logger: Any, name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
        now = time.monotonic()
        key = event_dict.get("logger", name)
        last = self._last_seen.get(key, now)
        event_dict["delta_ms"] = int((now - last) * 1000)
        self._last_seen[key] = now
        return event_dict


def _format_value(key: str, value: Any) -> str:
    if isinstance(value, str) and " " in value:
        return f'{key}="{value}"'
    if isinstance(value, (dict, list, tuple)):
        return f"{key}={value!r}"
    return f"{key}={value}"


def _console_renderer(logger: Any, name: str, event_dict: Dict[str, Any]) -> str:
    timestamp = event_dict.pop("timestamp", None)
    level = str(event_dict.pop("level", "info")).upper()
    component = event_dict.pop("logger", name)
    event = event_dict.pop("event", "")
    delta_ms = event_dict.pop("delta_ms", 0)

    ts_text = timestamp.split("T")[-1][:8] if isinstance(timestamp, str) else f"{datetime.now():%H:%M:%S}"
    style = _LEVEL_STYLES.get(level, "white")
    prefix = f"[dim]{ts_text}[/dim] | [{style}]{level:<7}[/] | [dim]{component}[/dim] | [cyan]+{delta_ms}ms[/cyan]"

    pairs = " ".join(_format_value(key, value) for key, value in sorted(event_dict.items()))
    return f"{prefix} | {event} {pairs}" if pairs else f"{prefix} | {event}"


def _shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
        EventDelta(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def configure_logging(
    level: Optional[str] = None,
    log_dir: Optional[Path | str] = None,
) -> None:
    """Configure console (and optional file) logging once per process."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    resolved_level = (level or os.getenv("SLEEP_COUNTDOWN_LOG_LEVEL", "WARNING")).upper()
    directory = log_dir or os.getenv("SLEEP_COUNTDOWN_LOG_DIR")

    console_handler = RichConsoleHandler()
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_console_renderer,
            foreign_pre_chain=_shared_processors(),
        )
    )
    handlers: list[logging.Handler] = [console_handler]

    if directory:
        path = Path(directory).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path / f"{datetime.now():%Y%m%d}.log", encoding="utf-8")
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer(),
                foreign_pre_chain=_shared_processors(),
            )
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, resolved_level, logging.WARNING),
        handlers=handlers,
        force=True,
    )

    structlog.configure(
        processors=_shared_processors() + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    _CONFIGURED = True


def get_logger(name: Optional[str] = None, **context: Any) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the given name and context."""
    configure_logging()
    base = structlog.get_logger(name or "sleep_countdown")
    if context:
        return base.bind(**context)
    return base
