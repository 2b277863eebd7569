"""A terminal clock that redraws the time and date every second."""

from __future__ import annotations

import argparse
import os
import subprocess
import time
from datetime import datetime


def format_time(moment: datetime) -> str:
    """Return the time as 12-hour clock text."""
    return moment.strftime("%I:%M:%S %p")


def format_date(moment: datetime) -> str:
    """Return the date as day-month-year followed by the weekday."""
    return moment.strftime("%d-%m-%Y %A")


def clear_screen() -> None:
    """Clear the terminal using the platform's command."""
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        pass


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Show a ticking digital clock.")
    parser.add_argument("--ticks", type=int, default=None, help="stop after this many updates")
    args = parser.parse_args(argv)
    shown = 0
    try:
        while args.ticks is None or shown < args.ticks:
            clear_screen()
            now = datetime.now()
            print(format_time(now))
            print(format_date(now))
            shown += 1
            time.sleep(1)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())