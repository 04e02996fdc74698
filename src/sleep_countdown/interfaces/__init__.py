"""User-facing entry points."""

from sleep_countdown.interfaces.cli import main as cli_main

__all__ = ["cli_main"]
