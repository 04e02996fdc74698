"""Console script entry point."""

from __future__ import annotations

import sys
from typing import Sequence

from sleep_countdown.interfaces.cli import main as _main


def main(argv: Sequence[str] | None = None) -> int:
    """Delegate to the CLI in ``interfaces``."""
    args = list(argv) if argv is not None else sys.argv[1:]
    return _main(args)
