"""Allow ``python -m sleep_countdown``."""

import sys

from sleep_countdown.interfaces.cli import main

if __name__ == "__main__":  # pragma: no cover - manual execution
    sys.exit(main())
